"""Self-contained scenarios that create, exercise and delete real AWS resources.

Each scenario takes an explicit config record and the service clients it needs,
fills blank config fields, acquires prerequisite resources in dependency order,
runs the operation under test and releases everything it created.
"""

from contextlib import nullcontext
from dataclasses import dataclass, replace
from typing import Optional

from ..clients.cloudwatch_client import CloudWatchClient
from ..clients.ec2_client import EC2Client
from ..clients.sqs_client import DEFAULT_MAX_RECEIVE_COUNT, SQSClient
from ..clients.sts_client import STSClient
from ..core.config import AlarmScenarioConfig, QueueScenarioConfig
from ..core.error_handling import ScenarioError
from ..core.identifiers import expected_queue_url, queue_arn_from_url, unique_name
from ..core.logging import get_logger
from .resources import managed_alarm, managed_queue

logger = get_logger("scenarios")


@dataclass
class DeadLetterQueueResult:
    queue_name: str
    queue_url: str
    dead_letter_queue_name: str
    dead_letter_queue_url: str
    dead_letter_queue_arn: str
    max_receive_count: int


@dataclass
class QueueUrlResult:
    queue_name: str
    queue_url: str
    expected_url: str
    queue_created: bool


@dataclass
class AlarmResult:
    alarm_name: str
    instance_name: str
    instance_id: str


def run_dead_letter_queue_scenario(
    config: QueueScenarioConfig,
    sqs: SQSClient,
    max_receive_count: int = DEFAULT_MAX_RECEIVE_COUNT,
) -> DeadLetterQueueResult:
    """Create a queue and a dead-letter queue, wire them together, delete both.

    Args:
        config: Queue names; blank names are generated
        sqs: SQS operation wrapper
        max_receive_count: Receives before a message moves to the dead-letter queue

    Returns:
        Names, URLs and ARN used by the run
    """
    config = config.with_defaults()

    with managed_queue(sqs, config.queue_name) as queue_url:
        with managed_queue(sqs, config.dl_queue_name) as dl_queue_url:
            dl_queue_arn = queue_arn_from_url(dl_queue_url)
            logger.info(
                f"Created dead-letter queue {config.dl_queue_name}", arn=dl_queue_arn
            )

            sqs.configure_dead_letter_queue(dl_queue_arn, queue_url, max_receive_count)

    return DeadLetterQueueResult(
        queue_name=config.queue_name,
        queue_url=queue_url,
        dead_letter_queue_name=config.dl_queue_name,
        dead_letter_queue_url=dl_queue_url,
        dead_letter_queue_arn=dl_queue_arn,
        max_receive_count=max_receive_count,
    )


def run_get_queue_url_scenario(
    config: QueueScenarioConfig,
    sqs: SQSClient,
    sts: STSClient,
) -> QueueUrlResult:
    """Look up a queue URL and check it against the URL SQS is known to assign.

    A named queue is expected to exist already and is left alone. With a blank
    name a queue is created for the lookup and deleted afterwards.

    Raises:
        ScenarioError: If the retrieved URL differs from the expected one
    """
    queue_name = config.queue_name
    queue_created = not queue_name
    if queue_created:
        queue_name = unique_name("myqueue-")

    scope = managed_queue(sqs, queue_name) if queue_created else nullcontext()
    with scope:
        queue_url = sqs.get_queue_url(queue_name)

    region = sqs.region_name
    expected_url = expected_queue_url(region, sts.get_account_id(), queue_name)

    if queue_url != expected_url:
        raise ScenarioError(
            f"The URL retrieved: {queue_url} does not match the expected URL: {expected_url}"
        )

    logger.info(f"The URL created matched the URL retrieved: {queue_url}")
    return QueueUrlResult(queue_name, queue_url, expected_url, queue_created)


def resolve_instance(config: AlarmScenarioConfig, ec2: Optional[EC2Client]) -> AlarmScenarioConfig:
    """Fill blank instance fields from the first named EC2 instance."""
    if not config.needs_instance_lookup:
        return config
    if ec2 is None:
        raise ScenarioError("Instance name and ID are blank and no EC2 client was given")

    instance_id, instance_name = ec2.find_named_instance()
    return replace(config, instance_name=instance_name, instance_id=instance_id)


def run_disable_alarm_scenario(
    config: AlarmScenarioConfig,
    cloudwatch: CloudWatchClient,
    ec2: Optional[EC2Client] = None,
) -> AlarmResult:
    """Create and enable an alarm, disable its actions, then delete it."""
    config = resolve_instance(config.with_defaults(), ec2)

    logger.info(f"Instance Name: {config.instance_name}")
    logger.info(f"Instance ID:   {config.instance_id}")
    logger.info(f"Alarm name:    {config.alarm_name}")

    with managed_alarm(
        cloudwatch, config.alarm_name, config.instance_name, config.instance_id
    ) as alarm_name:
        cloudwatch.disable_alarm(alarm_name)

    return AlarmResult(config.alarm_name, config.instance_name, config.instance_id)
