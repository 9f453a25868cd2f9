"""Amazon EC2 instance lookup for the alarm scenario."""

from typing import Optional, Tuple

from ..core.error_handling import ResourceNotFoundError
from .base import AWSServiceClient


def _name_tag(instance) -> Optional[str]:
    for tag in instance.get("Tags", []):
        if tag.get("Key") == "Name":
            return tag.get("Value")
    return None


class EC2Client(AWSServiceClient):
    """Wrapper for Amazon EC2 that finds an instance to attach an alarm to."""

    service_name = "ec2"

    def find_named_instance(self) -> Tuple[str, str]:
        """Find the first instance that has both an ID and a Name tag.

        Returns:
            Tuple of (instance_id, instance_name)

        Raises:
            ResourceNotFoundError: If no instance has a Name tag
        """
        paginator = self.get_client().get_paginator("describe_instances")

        for page in paginator.paginate():
            for reservation in page.get("Reservations", []):
                for instance in reservation.get("Instances", []):
                    instance_id = instance.get("InstanceId")
                    name = _name_tag(instance)
                    if instance_id and name:
                        self.logger.info(
                            f"Using instance {name}", instance_id=instance_id
                        )
                        return instance_id, name

        raise ResourceNotFoundError("No EC2 instance found with name and ID")
