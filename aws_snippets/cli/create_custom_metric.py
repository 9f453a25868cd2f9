"""Publish a data point for a custom CloudWatch metric.

Usage:
    aws-create-custom-metric -n SITE/TRAFFIC -m UniqueVisitors -u Count -v 5885.0 \
        -dn SiteName -dv example.com
"""

import sys

from ..clients.cloudwatch_client import CloudWatchClient
from ..core.error_handling import report_errors
from .common import bootstrap, build_parser, missing


def parse_args(argv=None):
    parser = build_parser("Create a custom metric in a CloudWatch namespace")
    parser.add_argument("-n", dest="namespace", help="The namespace for the metric")
    parser.add_argument("-m", dest="metric_name", help="The name of the metric")
    parser.add_argument("-u", dest="unit", help="The units for the metric")
    parser.add_argument("-v", dest="value", type=float, default=0.0,
                        help="The value of the units")
    parser.add_argument("-dn", dest="dimension_name", help="The name of the dimension")
    parser.add_argument("-dv", dest="dimension_value", help="The value of the dimension")
    return parser.parse_args(argv)


@report_errors("Got an error creating the custom metric:")
def main(argv=None) -> int:
    args = parse_args(argv)

    if missing(args.namespace, args.metric_name, args.unit,
               args.dimension_name, args.dimension_value):
        print("You must supply a namespace (-n NAMESPACE), metric name (-m METRIC-NAME), "
              "unit (-u UNIT), dimension name (-dn DIMENSION-NAME) "
              "and dimension value (-dv DIMENSION-VALUE)")
        return 0

    _, session = bootstrap(args)
    cloudwatch = CloudWatchClient(aws_session=session)
    cloudwatch.create_custom_metric(
        args.namespace,
        args.metric_name,
        args.unit,
        args.value,
        args.dimension_name,
        args.dimension_value,
    )

    print(f"Created metric {args.metric_name} in namespace {args.namespace}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
