"""Configuration management for the AWS snippet programs and scenarios."""

import json
import os
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Optional

from .error_handling import ConfigurationError
from .identifiers import unique_name

DEFAULT_CONFIG_FILE = "config.json"


@dataclass
class Config:
    """Runtime settings shared by every CLI program."""

    # AWS Settings (None defers to ~/.aws/config and the environment)
    aws_region: Optional[str] = None
    aws_profile: Optional[str] = None

    # Scenario Settings
    config_file: str = DEFAULT_CONFIG_FILE

    # Logging Settings
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        return cls(
            aws_region=os.getenv("AWS_DEFAULT_REGION") or os.getenv("AWS_REGION"),
            aws_profile=os.getenv("AWS_PROFILE"),
            config_file=os.getenv("AWS_SNIPPETS_CONFIG_FILE", DEFAULT_CONFIG_FILE),
            log_level=os.getenv("AWS_SNIPPETS_LOG_LEVEL", "INFO"),
        )

    @classmethod
    def from_args(cls, args) -> "Config":
        """Create config from command line arguments."""
        config = cls.from_env()

        # Override with CLI arguments if provided
        if getattr(args, "region", None):
            config.aws_region = args.region
        if getattr(args, "profile", None):
            config.aws_profile = args.profile
        if getattr(args, "config_file", None):
            config.config_file = args.config_file
        if getattr(args, "log_level", None):
            config.log_level = args.log_level

        return config


def load_json_config(path: str) -> Dict[str, str]:
    """Read a flat JSON object of string values.

    Args:
        path: Path of the JSON file

    Returns:
        Mapping of field name to value

    Raises:
        ConfigurationError: If the file is unreadable, is not valid JSON, is not a
            JSON object or holds a non-string value
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Could not parse configuration file {path}: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a JSON object", path
        )

    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(
                f"Configuration value {key!r} in {path} must be a string", path
            )

    return data


class _ScenarioConfig:
    """Shared loading logic for the scenario records below.

    Subclasses are dataclasses that map JSON keys to attributes in JSON_FIELDS.
    Unknown keys are ignored; absent keys stay blank.
    """

    JSON_FIELDS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        values = {
            attr: data.get(key) or "" for key, attr in cls.JSON_FIELDS.items()
        }
        return cls(**values)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE):
        """Load the record from a JSON config file."""
        return cls.from_dict(load_json_config(path))

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for key, attr in self.JSON_FIELDS.items()}


@dataclass
class QueueScenarioConfig(_ScenarioConfig):
    """Values consumed by the queue scenarios."""

    JSON_FIELDS: ClassVar[Dict[str, str]] = {
        "QueueName": "queue_name",
        "DlQueueName": "dl_queue_name",
    }

    queue_name: str = ""
    dl_queue_name: str = ""

    def with_defaults(self) -> "QueueScenarioConfig":
        """Return a copy with generated names for every blank field."""
        return replace(
            self,
            queue_name=self.queue_name or unique_name("myqueue-"),
            dl_queue_name=self.dl_queue_name or unique_name("mydlqueue-"),
        )


@dataclass
class AlarmScenarioConfig(_ScenarioConfig):
    """Values consumed by the alarm scenario.

    Blank instance fields are resolved from EC2 by the scenario itself, since that
    needs a session; only the alarm name is generated here.
    """

    JSON_FIELDS: ClassVar[Dict[str, str]] = {
        "InstanceName": "instance_name",
        "InstanceID": "instance_id",
        "AlarmName": "alarm_name",
    }

    instance_name: str = ""
    instance_id: str = ""
    alarm_name: str = ""

    def with_defaults(self) -> "AlarmScenarioConfig":
        """Return a copy with a generated alarm name if it was blank."""
        return replace(self, alarm_name=self.alarm_name or unique_name("Alarm70-"))

    @property
    def needs_instance_lookup(self) -> bool:
        return not (self.instance_name and self.instance_id)
