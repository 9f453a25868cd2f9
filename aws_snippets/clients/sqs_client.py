"""Amazon SQS operations: queue lifecycle, URL lookup and dead-letter wiring."""

import json
from typing import Dict, Iterable, Optional

from .base import AWSServiceClient

DEFAULT_QUEUE_ATTRIBUTES = {
    "DelaySeconds": "60",
    "MessageRetentionPeriod": "86400",
}

DEFAULT_MAX_RECEIVE_COUNT = 10


class SQSClient(AWSServiceClient):
    """Thin wrappers around the SQS queue APIs."""

    service_name = "sqs"

    def create_queue(self, queue_name: str, attributes: Optional[Dict[str, str]] = None) -> str:
        """Create a queue.

        Args:
            queue_name: Name of the queue
            attributes: Queue attributes; a 60 second delay and one day retention
                when None

        Returns:
            URL of the new queue
        """
        if attributes is None:
            attributes = DEFAULT_QUEUE_ATTRIBUTES

        result = self.get_client().create_queue(
            QueueName=queue_name, Attributes=dict(attributes)
        )
        queue_url = result["QueueUrl"]
        self.logger.info(f"Got URL {queue_url} for queue {queue_name}")
        return queue_url

    def get_queue_url(self, queue_name: str) -> str:
        """Get the URL of a queue by name."""
        result = self.get_client().get_queue_url(QueueName=queue_name)
        return result["QueueUrl"]

    def delete_queue(self, queue_url: str) -> None:
        """Delete the queue at ``queue_url``."""
        self.get_client().delete_queue(QueueUrl=queue_url)
        self.logger.info(f"Deleted queue {queue_url}")

    def get_queue_attributes(self, queue_url: str, names: Iterable[str] = ("All",)) -> Dict[str, str]:
        """Return the queue's attributes, e.g. "RedrivePolicy" or "QueueArn".

        Args:
            queue_url: URL of the queue
            names: Attribute names to fetch; "All" fetches every attribute
        """
        result = self.get_client().get_queue_attributes(
            QueueUrl=queue_url, AttributeNames=list(names)
        )
        return result.get("Attributes", {})

    def configure_dead_letter_queue(
        self,
        dead_letter_queue_arn: str,
        queue_url: str,
        max_receive_count: int = DEFAULT_MAX_RECEIVE_COUNT,
    ) -> None:
        """Send messages that ``queue_url`` fails to deliver to a dead-letter queue.

        Args:
            dead_letter_queue_arn: ARN of the dead-letter queue
            queue_url: URL of the source queue
            max_receive_count: Receives before a message moves to the dead-letter queue
        """
        policy = {
            "deadLetterTargetArn": dead_letter_queue_arn,
            "maxReceiveCount": str(max_receive_count),
        }

        self.get_client().set_queue_attributes(
            QueueUrl=queue_url,
            Attributes={"RedrivePolicy": json.dumps(policy)},
        )
        self.logger.info(
            f"Configured dead-letter queue for {queue_url}",
            dead_letter_queue_arn=dead_letter_queue_arn,
            max_receive_count=max_receive_count,
        )
