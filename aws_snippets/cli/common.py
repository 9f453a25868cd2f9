"""Argument and session plumbing shared by the CLI programs."""

import argparse
from typing import Tuple

import boto3

from ..core.config import Config
from ..core.logging import setup_logging
from ..core.session import create_session


def build_parser(description: str) -> argparse.ArgumentParser:
    """Create a parser carrying the flags every program accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--region", type=str, default=None,
                        help="AWS region (default: from ~/.aws/config or AWS_DEFAULT_REGION)")
    parser.add_argument("--profile", type=str, default=None,
                        help="Named profile from ~/.aws/credentials")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level (default: INFO)")
    return parser


def bootstrap(args: argparse.Namespace) -> Tuple[Config, boto3.Session]:
    """Configure logging and create the AWS session for parsed arguments."""
    config = Config.from_args(args)
    setup_logging(config.log_level)
    return config, create_session(config)


def missing(*values) -> bool:
    """True if any required value was not supplied."""
    return any(value is None or value == "" for value in values)
