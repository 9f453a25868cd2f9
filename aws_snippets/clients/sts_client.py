"""AWS STS caller identity lookup."""

from .base import AWSServiceClient


class STSClient(AWSServiceClient):
    """Wrapper for AWS STS, used to find the account a queue URL should name."""

    service_name = "sts"

    def get_account_id(self) -> str:
        """Account ID of the credentials in use."""
        return self.get_client().get_caller_identity()["Account"]
