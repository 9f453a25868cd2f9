"""Shared fixtures: mocked AWS credentials, moto-backed sessions and config files."""

import json
import os
import sys

import boto3
import pytest
from moto import mock_aws

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

TEST_REGION = "us-west-2"
TEST_ACCOUNT_ID = "123456789012"


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def aws_session(aws_credentials):
    """boto3 session whose calls are served by moto."""
    with mock_aws():
        yield boto3.Session(region_name=TEST_REGION)


@pytest.fixture
def write_config(tmp_path):
    """Write a scenario config file and return its path."""

    def _write(content, name="config.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write
