"""Create a CPU-utilisation alarm for an EC2 instance and enable its actions.

Usage:
    aws-enable-alarm -a ALARM-NAME -n INSTANCE-NAME -i INSTANCE-ID
"""

import sys

from ..clients.cloudwatch_client import CloudWatchClient
from ..core.error_handling import report_errors
from .common import bootstrap, build_parser, missing


def parse_args(argv=None):
    parser = build_parser("Create and enable a CloudWatch alarm for an EC2 instance")
    parser.add_argument("-a", dest="alarm_name", help="The name of the alarm")
    parser.add_argument("-n", dest="instance_name", help="The name of the instance")
    parser.add_argument("-i", dest="instance_id", help="The ID of the instance")
    return parser.parse_args(argv)


@report_errors("Got an error enabling the alarm:")
def main(argv=None) -> int:
    args = parse_args(argv)

    if missing(args.alarm_name, args.instance_name, args.instance_id):
        print("You must supply an alarm name (-a ALARM-NAME), instance name "
              "(-n INSTANCE-NAME) and instance ID (-i INSTANCE-ID)")
        return 0

    _, session = bootstrap(args)
    CloudWatchClient(aws_session=session).enable_alarm(
        args.alarm_name, args.instance_name, args.instance_id
    )

    print(f"Enabled alarm {args.alarm_name} for instance {args.instance_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
