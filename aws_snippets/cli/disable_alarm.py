"""Disable the actions of a CloudWatch alarm.

Usage:
    aws-disable-alarm -a ALARM-NAME
"""

import sys

from ..clients.cloudwatch_client import CloudWatchClient
from ..core.error_handling import report_errors
from .common import bootstrap, build_parser, missing


def parse_args(argv=None):
    parser = build_parser("Disable the actions of a CloudWatch alarm")
    parser.add_argument("-a", dest="alarm_name", help="The name of the alarm")
    return parser.parse_args(argv)


@report_errors("Got an error disabling the alarm:")
def main(argv=None) -> int:
    args = parse_args(argv)

    if missing(args.alarm_name):
        print("You must supply an alarm name (-a ALARM-NAME)")
        return 0

    _, session = bootstrap(args)
    CloudWatchClient(aws_session=session).disable_alarm(args.alarm_name)

    print(f"Disabled alarm {args.alarm_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
