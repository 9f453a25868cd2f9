"""Run one of the self-cleaning integration scenarios against a real AWS account.

Usage:
    aws-snippets-scenario dead-letter-queue [-c config.json]
    aws-snippets-scenario get-queue-url [-c config.json]
    aws-snippets-scenario disable-alarm [-c config.json]

The config file is a JSON object, e.g. {"QueueName": "", "DlQueueName": ""}.
Blank or absent names are generated; see the scenario functions for details.
"""

import sys
from dataclasses import asdict

from ..clients import CloudWatchClient, EC2Client, SQSClient, STSClient
from ..core.config import AlarmScenarioConfig, QueueScenarioConfig
from ..core.error_handling import report_errors
from ..core.logging import get_logger
from ..lifecycle.scenarios import (
    run_dead_letter_queue_scenario,
    run_disable_alarm_scenario,
    run_get_queue_url_scenario,
)
from .common import bootstrap, build_parser

SCENARIOS = ("dead-letter-queue", "get-queue-url", "disable-alarm")


def parse_args(argv=None):
    parser = build_parser("Run a self-cleaning AWS integration scenario")
    parser.add_argument("scenario", choices=SCENARIOS, help="Scenario to run")
    parser.add_argument("-c", "--config-file", dest="config_file", default=None,
                        help="JSON config file (default: config.json)")
    return parser.parse_args(argv)


def run(name: str, config_file: str, session):
    """Load the scenario config and run the named scenario."""
    if name == "dead-letter-queue":
        return run_dead_letter_queue_scenario(
            QueueScenarioConfig.from_file(config_file),
            SQSClient(aws_session=session),
        )
    if name == "get-queue-url":
        return run_get_queue_url_scenario(
            QueueScenarioConfig.from_file(config_file),
            SQSClient(aws_session=session),
            STSClient(aws_session=session),
        )
    if name == "disable-alarm":
        return run_disable_alarm_scenario(
            AlarmScenarioConfig.from_file(config_file),
            CloudWatchClient(aws_session=session),
            EC2Client(aws_session=session),
        )
    raise ValueError(f"Unknown scenario: {name}")


@report_errors("Got an error running the scenario:")
def main(argv=None) -> int:
    args = parse_args(argv)
    config, session = bootstrap(args)
    logger = get_logger("scenario")

    with logger.timer(f"{args.scenario} scenario"):
        result = run(args.scenario, config.config_file, session)

    for key, value in asdict(result).items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
