"""boto3 session bootstrap.

Credentials and region come from the ambient AWS environment (~/.aws/credentials,
~/.aws/config, AWS_* variables); a Config only narrows the profile or region.
"""

from typing import Optional

import boto3

from .config import Config
from .logging import get_logger

logger = get_logger("session")


def create_session(config: Optional[Config] = None) -> boto3.Session:
    """Create a boto3 session for the given runtime configuration."""
    config = config or Config.from_env()
    session = boto3.Session(
        profile_name=config.aws_profile, region_name=config.aws_region
    )
    logger.debug(
        "Created AWS session",
        profile=config.aws_profile or "default",
        region=session.region_name,
    )
    return session
