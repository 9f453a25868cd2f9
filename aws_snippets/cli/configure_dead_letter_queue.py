"""Configure a dead-letter queue for messages an SQS queue could not deliver.

Usage:
    aws-configure-dlq -u QUEUE-URL -d DEAD-LETTER-QUEUE-ARN
"""

import sys

from ..clients.sqs_client import SQSClient
from ..core.error_handling import report_errors
from .common import bootstrap, build_parser, missing


def parse_args(argv=None):
    parser = build_parser("Configure a dead-letter queue for an SQS queue")
    parser.add_argument("-u", dest="queue_url", help="The URL of the queue")
    parser.add_argument("-d", dest="dead_letter_queue_arn",
                        help="The ARN of the dead-letter queue")
    return parser.parse_args(argv)


@report_errors("Got an error creating the dead-letter queue:")
def main(argv=None) -> int:
    args = parse_args(argv)

    if missing(args.queue_url, args.dead_letter_queue_arn):
        print("You must supply the URL of the queue (-u QUEUE-URL) "
              "and the ARN of the dead-letter queue (-d QUEUE-ARN)")
        return 0

    _, session = bootstrap(args)
    SQSClient(aws_session=session).configure_dead_letter_queue(
        args.dead_letter_queue_arn, args.queue_url
    )

    print("Created dead-letter queue")
    return 0


if __name__ == "__main__":
    sys.exit(main())
