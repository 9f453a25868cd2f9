"""Scoped acquisition and best-effort release of AWS resources.

Each context manager creates one resource on entry and deletes it exactly once on
exit, whichever way the ``with`` block ends. A failed delete is logged with a
manual-remediation hint. It is raised as CleanupError only when the block itself
succeeded, so it never hides the error that ended the block.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from ..clients.cloudwatch_client import CloudWatchClient
from ..clients.sqs_client import SQSClient
from ..core.error_handling import CleanupError
from ..core.logging import get_logger

logger = get_logger("lifecycle")

Handle = TypeVar("Handle")


def _release(release: Callable[[Handle], None], handle: Handle, description: str, raise_errors: bool):
    try:
        release(handle)
    except Exception as e:
        logger.warning(
            f"You'll have to delete {description} yourself",
            handle=handle,
            error=str(e),
        )
        if raise_errors:
            raise CleanupError(description, str(handle), e) from e
        return

    logger.info(f"Deleted {description}")


@contextmanager
def managed_resource(
    acquire: Callable[[], Handle],
    release: Callable[[Handle], None],
    description: str,
) -> Iterator[Handle]:
    """Acquire a resource for the duration of a ``with`` block.

    Args:
        acquire: Creates the resource and returns its handle (URL, ARN or name)
        release: Deletes the resource given its handle
        description: Used in log lines, e.g. "queue myqueue-..."

    Yields:
        The handle returned by ``acquire``

    Raises:
        CleanupError: If ``release`` fails after the block completed normally
    """
    handle = acquire()
    logger.debug(f"Acquired {description}", handle=handle)

    try:
        yield handle
    except BaseException:
        _release(release, handle, description, raise_errors=False)
        raise

    _release(release, handle, description, raise_errors=True)


def managed_queue(sqs: SQSClient, queue_name: str):
    """Create a queue and yield its URL; the queue is deleted on exit."""
    return managed_resource(
        lambda: sqs.create_queue(queue_name),
        sqs.delete_queue,
        f"queue {queue_name}",
    )


@contextmanager
def managed_alarm(cloudwatch: CloudWatchClient, alarm_name: str, instance_name: str, instance_id: str) -> Iterator[str]:
    """Create and enable an alarm and yield its name; the alarm is deleted on exit.

    Only PutMetricAlarm counts as acquisition. Enabling the actions runs inside the
    scope, so the alarm is deleted even if EnableAlarmActions fails.
    """
    with managed_resource(
        lambda: cloudwatch.put_alarm(alarm_name, instance_name, instance_id),
        cloudwatch.delete_alarm,
        f"alarm {alarm_name}",
    ) as name:
        cloudwatch.enable_alarm_actions(name)
        yield name
