"""Configuration, logging, error types and identifiers shared by all programs."""

from .config import AlarmScenarioConfig, Config, QueueScenarioConfig
from .error_handling import (
    ArnParseError,
    CleanupError,
    ConfigurationError,
    ResourceNotFoundError,
    ScenarioError,
    SnippetError,
)

__all__ = [
    "AlarmScenarioConfig",
    "ArnParseError",
    "CleanupError",
    "Config",
    "ConfigurationError",
    "QueueScenarioConfig",
    "ResourceNotFoundError",
    "ScenarioError",
    "SnippetError",
]
