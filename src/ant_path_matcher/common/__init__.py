"""Common utilities and shared functionality."""

from .exceptions import (
    ConfigurationError,
    InconsistentMatchStateError,
    InvalidArgumentError,
    PathMatcherError,
    PatternMismatchError,
)
from .logging import get_logger, setup_logging
from .utils import has_text, tokenize_to_list

__all__ = [
    # Exceptions
    "PathMatcherError",
    "InvalidArgumentError",
    "InconsistentMatchStateError",
    "PatternMismatchError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "has_text",
    "tokenize_to_list",
]
