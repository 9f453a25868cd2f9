"""Operation wrappers for the AWS services used by the snippets."""

from .cloudwatch_client import CloudWatchClient
from .ec2_client import EC2Client
from .sqs_client import SQSClient
from .sts_client import STSClient

__all__ = ['CloudWatchClient', 'EC2Client', 'SQSClient', 'STSClient']
