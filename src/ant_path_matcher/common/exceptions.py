"""Custom exceptions for the Ant path matcher."""


class PathMatcherError(Exception):
    """Base exception for all path matcher errors."""
    pass


class InvalidArgumentError(PathMatcherError, ValueError):
    """Raised when a pattern, path or argument is malformed or unusable."""
    pass


class InconsistentMatchStateError(PathMatcherError, RuntimeError):
    """Raised when a compiled segment reports more captures than variables.

    This is a programming error in the pattern (usually a capturing group
    inside a custom variable regex), never a normal match failure.
    """
    pass


class PatternMismatchError(PathMatcherError, LookupError):
    """Raised when variables are extracted from a path the pattern rejects."""

    def __init__(self, pattern: str, path: str) -> None:
        self.pattern = pattern
        self.path = path
        super().__init__(f"Pattern '{pattern}' is not a match for '{path}'")


class ConfigurationError(PathMatcherError):
    """Raised when matcher configuration is invalid."""
    pass
