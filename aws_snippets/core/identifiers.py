"""Resource names and identifiers: generated names, queue URLs and queue ARNs."""

import re
import uuid
from typing import NamedTuple
from urllib.parse import urlparse

from .error_handling import ArnParseError

DEFAULT_PARTITION = "aws"

_ACCOUNT_ID = re.compile(r"^\d{12}$")
_REGION = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")


class QueueUrl(NamedTuple):
    """Components of an SQS queue URL.

    https://sqs.us-west-2.amazonaws.com/123456789012/MyQueue
            service region               account      name
    """

    service: str
    region: str
    account_id: str
    queue_name: str


def unique_name(prefix: str) -> str:
    """Append a random UUID to ``prefix``, e.g. "myqueue-1b4e28ba-2fa1-..."."""
    return f"{prefix}{uuid.uuid4()}"


def parse_queue_url(url: str) -> QueueUrl:
    """Split a queue URL into its components.

    Args:
        url: Queue URL as returned by CreateQueue or GetQueueUrl

    Returns:
        QueueUrl with service, region, account ID and queue name

    Raises:
        ArnParseError: If the URL is not
            ``http(s)://sqs.<region>.<domain>/<12-digit account>/<name>``
    """
    if not isinstance(url, str) or not url:
        raise ArnParseError("Queue URL is empty", str(url))

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ArnParseError(f"Queue URL has unsupported scheme: {url}", url)

    host_labels = (parsed.hostname or "").split(".")
    if len(host_labels) < 3 or host_labels[0] != "sqs":
        raise ArnParseError(
            f"Queue URL host must look like sqs.<region>.<domain>: {url}", url
        )
    if not _REGION.match(host_labels[1]):
        raise ArnParseError(f"Queue URL has an invalid region: {url}", url)

    path_parts = parsed.path.strip("/").split("/")
    if len(path_parts) != 2 or not all(path_parts):
        raise ArnParseError(
            f"Queue URL path must be /<account-id>/<queue-name>: {url}", url
        )

    account_id, queue_name = path_parts
    if not _ACCOUNT_ID.match(account_id):
        raise ArnParseError(f"Queue URL has an invalid account ID: {url}", url)

    return QueueUrl(host_labels[0], host_labels[1], account_id, queue_name)


def queue_arn_from_url(url: str, partition: str = DEFAULT_PARTITION) -> str:
    """Derive a queue ARN from its URL.

    The partition is not part of the URL, so it defaults to "aws"; pass
    "aws-cn" or "aws-us-gov" for queues in those partitions.
    """
    parts = parse_queue_url(url)
    return (
        f"arn:{partition}:{parts.service}:{parts.region}:"
        f"{parts.account_id}:{parts.queue_name}"
    )


def expected_queue_url(region: str, account_id: str, queue_name: str) -> str:
    """Build the URL SQS assigns to a queue, e.g. for comparison with GetQueueUrl."""
    return f"https://sqs.{region}.amazonaws.com/{account_id}/{queue_name}"
