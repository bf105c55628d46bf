"""Protocol interface for string-based path matching."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathMatcher(Protocol):
    """Protocol for matching paths against patterns.

    Used by request routers and resource resolvers that only care about
    these operations, not about the pattern syntax behind them.
    """

    def is_pattern(self, path: str | None) -> bool:
        """Does the given path represent a pattern rather than a plain path?"""
        ...

    def match(self, pattern: str, path: str | None) -> bool:
        """Match the whole path against the pattern."""
        ...

    def match_start(self, pattern: str, path: str | None) -> bool:
        """Match the path against the start of the pattern."""
        ...

    def extract_path_within_pattern(self, pattern: str, path: str) -> str:
        """Return the part of the path matched by the pattern's dynamic parts."""
        ...

    def extract_uri_template_variables(self, pattern: str, path: str) -> dict[str, str]:
        """Return the template variables the pattern binds in the path."""
        ...

    def get_pattern_comparator(self, path: str) -> Callable[[str, str], int]:
        """Return a comparison function ordering patterns by specificity."""
        ...

    def combine(self, pattern1: str | None, pattern2: str | None) -> str:
        """Combine two patterns into a new pattern."""
        ...
