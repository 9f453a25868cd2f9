"""AWS Snippets

Small, single-purpose programs that call Amazon CloudWatch and Amazon SQS, plus
self-cleaning scenarios that create, exercise and delete the resources they need.
"""

__version__ = "1.0.0"
__author__ = "AWS Snippets"

from .core.config import Config

__all__ = ["Config"]
