"""Base class for the AWS service client wrappers."""

from abc import ABC
from typing import Optional

import boto3

from ..core.logging import get_logger


class AWSServiceClient(ABC):
    """Lazily creates and reuses one boto3 client for ``service_name``.

    Subclasses add one method per remote operation. Those methods build the request,
    make a single call and return a simplified result; botocore errors propagate
    to the caller unchanged.
    """

    service_name: str = ""

    def __init__(self, aws_session: Optional[boto3.Session] = None, region: Optional[str] = None, client=None):
        """Initialize the wrapper.

        Args:
            aws_session: Boto3 session for AWS API calls (default session if None)
            region: Region override; None uses the session's region
            client: Pre-built boto3 client, mainly for tests
        """
        self.aws_session = aws_session
        self.region = region
        self.logger = get_logger(f"{self.service_name}_client")
        self._client = client

    def get_client(self):
        """Get the boto3 client with connection reuse."""
        if self._client is None:
            if self.aws_session:
                self._client = self.aws_session.client(self.service_name, region_name=self.region)
            else:
                self._client = boto3.client(self.service_name, region_name=self.region)
            self.logger.debug(
                f"Initialized {self.service_name} client",
                region=self.region_name,
            )
        return self._client

    @property
    def region_name(self) -> Optional[str]:
        """Region the client talks to."""
        if self._client is not None:
            return self._client.meta.region_name
        if self.region:
            return self.region
        if self.aws_session:
            return self.aws_session.region_name
        return None
