"""Error types and CLI error reporting for the AWS snippet programs.

Remote failures are never retried or classified: a botocore error raised by an
operation wrapper reaches its caller unchanged.
"""

import functools
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .logging import get_logger


class SnippetError(Exception):
    """Base class for errors raised by this package (not by AWS)."""

    pass


class ConfigurationError(SnippetError):
    """Raised when a scenario config file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ArnParseError(SnippetError, ValueError):
    """Raised when a queue URL does not have the shape an ARN can be derived from."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class ResourceNotFoundError(SnippetError):
    """Raised when a prerequisite resource cannot be located."""

    pass


class ScenarioError(SnippetError):
    """Raised when a scenario observes a result other than the expected one."""

    pass


class CleanupError(SnippetError):
    """Raised when a resource created for a scenario could not be released.

    Attributes:
        description: Human-readable resource description ("queue myqueue-...")
        handle: URL, ARN or name that was passed to the release call
    """

    def __init__(self, description: str, handle: str, cause: Exception):
        super().__init__(
            f"Could not delete {description}; you'll have to delete it yourself: {cause}"
        )
        self.description = description
        self.handle = handle
        self.cause = cause


def describe_error(error: Exception) -> str:
    """Render an exception for a terminal.

    botocore ClientErrors are shown as "Code: Message"; everything else uses str().
    """
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = details.get("Code", "Unknown")
        message = details.get("Message", str(error))
        return f"{code}: {message}"
    return str(error)


def report_errors(message: str):
    """Decorator for CLI entry points.

    Failures from AWS or from this package are printed after ``message`` and the
    entry point returns 0, so callers cannot tell failure apart by exit status.

    Args:
        message: Line printed before the error, e.g. "Got an error getting the queue URL:"

    Returns:
        Decorated function
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(f"cli.{func.__module__.rsplit('.', 1)[-1]}")
            try:
                return func(*args, **kwargs)
            except (ClientError, BotoCoreError, SnippetError) as e:
                logger.debug(f"{func.__name__} failed", error_type=type(e).__name__)
                print(message)
                print(describe_error(e))
                return 0

        return wrapper

    return decorator
