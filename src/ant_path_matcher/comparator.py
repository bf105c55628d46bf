"""Specificity ordering of patterns relative to a concrete path."""

import re
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any

from .config import DEFAULT_PATH_SEPARATOR

VARIABLE_PATTERN = re.compile(r"\{[^/]+?\}")


class PatternInfo:
    """Counts that decide how specific a pattern is"""

    def __init__(self, pattern: str | None, separator: str = DEFAULT_PATH_SEPARATOR):
        self.pattern = pattern
        self.uri_vars = 0
        self.single_wildcards = 0
        self.double_wildcards = 0
        self.catch_all_pattern = False
        self.prefix_pattern = False
        self._length: int | None = None

        if pattern is not None:
            self._init_counters(pattern)
            double_wildcard = separator + "**"
            self.catch_all_pattern = pattern == double_wildcard
            self.prefix_pattern = not self.catch_all_pattern and pattern.endswith(
                double_wildcard
            )

        if self.uri_vars == 0:
            self._length = len(pattern) if pattern is not None else 0

    def _init_counters(self, pattern: str) -> None:
        pos = 0
        while pos < len(pattern):
            char = pattern[pos]
            if char == "{":
                self.uri_vars += 1
                pos += 1
            elif char == "*":
                if pos + 1 < len(pattern) and pattern[pos + 1] == "*":
                    self.double_wildcards += 1
                    pos += 2
                elif pos > 0 and pattern[pos - 1:] != ".*":
                    self.single_wildcards += 1
                    pos += 1
                else:
                    pos += 1
            else:
                pos += 1

    @property
    def least_specific(self) -> bool:
        return self.pattern is None or self.catch_all_pattern

    @property
    def total_count(self) -> int:
        return self.uri_vars + self.single_wildcards + 2 * self.double_wildcards

    @property
    def length(self) -> int:
        """Pattern length with every URI variable counted as one character"""
        if self._length is None:
            self._length = (
                len(VARIABLE_PATTERN.sub("#", self.pattern))
                if self.pattern is not None
                else 0
            )
        return self._length

    def __repr__(self) -> str:
        return f"PatternInfo('{self.pattern}')"


class AntPatternComparator:
    """Orders patterns from most to least specific for one path.

    Instances are plain ``(pattern1, pattern2) -> int`` comparison functions;
    use ``sort_key()`` or ``sort()`` to order a collection.
    """

    def __init__(self, path: str, separator: str = DEFAULT_PATH_SEPARATOR):
        self.path = path
        self.separator = separator

    def __call__(self, pattern1: str | None, pattern2: str | None) -> int:
        return self.compare(pattern1, pattern2)

    def compare(self, pattern1: str | None, pattern2: str | None) -> int:
        info1 = PatternInfo(pattern1, self.separator)
        info2 = PatternInfo(pattern2, self.separator)

        if info1.least_specific and info2.least_specific:
            return 0
        elif info1.least_specific:
            return 1
        elif info2.least_specific:
            return -1

        pattern1_equals_path = pattern1 == self.path
        pattern2_equals_path = pattern2 == self.path
        if pattern1_equals_path and pattern2_equals_path:
            return 0
        elif pattern1_equals_path:
            return -1
        elif pattern2_equals_path:
            return 1

        if info1.prefix_pattern and info2.prefix_pattern:
            return info2.length - info1.length
        elif info1.prefix_pattern and info2.double_wildcards == 0:
            return 1
        elif info2.prefix_pattern and info1.double_wildcards == 0:
            return -1

        if info1.total_count != info2.total_count:
            return info1.total_count - info2.total_count

        if info1.length != info2.length:
            return info2.length - info1.length

        if info1.single_wildcards < info2.single_wildcards:
            return -1
        elif info2.single_wildcards < info1.single_wildcards:
            return 1

        if info1.uri_vars < info2.uri_vars:
            return -1
        elif info2.uri_vars < info1.uri_vars:
            return 1

        return 0

    def sort_key(self) -> Callable[[Any], Any]:
        """Key function for ``sorted()`` and ``list.sort()``"""
        return cmp_to_key(self.compare)

    def sort(self, patterns: Iterable[str]) -> list[str]:
        """Return the patterns ordered from most to least specific"""
        return sorted(patterns, key=self.sort_key())

    def __repr__(self) -> str:
        return f"AntPatternComparator('{self.path}')"
