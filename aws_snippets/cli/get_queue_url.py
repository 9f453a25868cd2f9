"""Print the URL of an SQS queue.

Usage:
    aws-get-queue-url -n QUEUE-NAME
"""

import sys

from ..clients.sqs_client import SQSClient
from ..core.error_handling import report_errors
from .common import bootstrap, build_parser, missing


def parse_args(argv=None):
    parser = build_parser("Get the URL of an SQS queue")
    parser.add_argument("-n", dest="queue_name", help="The name of the queue")
    return parser.parse_args(argv)


@report_errors("Got an error getting the queue URL:")
def main(argv=None) -> int:
    args = parse_args(argv)

    if missing(args.queue_name):
        print("You must supply a queue name (-n QUEUE-NAME)")
        return 0

    _, session = bootstrap(args)
    url = SQSClient(aws_session=session).get_queue_url(args.queue_name)

    print(f"URL for queue {args.queue_name}: {url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
