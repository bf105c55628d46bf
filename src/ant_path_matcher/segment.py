"""Compilation and matching of single path segments.

A segment is the text between two separators. Its glob grammar is:

- ``?`` matches exactly one character
- ``*`` matches zero or more characters
- ``{name}`` binds any run of characters to ``name``
- ``{name:regex}`` binds a run matching ``regex`` to ``name``

Segments without any of these markers compile to an exact matcher that
compares plain strings; everything else compiles to an anchored regex.
"""

import re
from dataclasses import dataclass, field
from re import Pattern
from typing import Union

from .common.exceptions import (
    InconsistentMatchStateError,
    InvalidArgumentError,
)

GLOB_PATTERN = re.compile(r"\?|\*|\{((?:\{[^/]+?\}|[^/{}]|\\[{}])+?)\}")

# Compiled with re.DOTALL so the default capture also spans newlines
DEFAULT_VARIABLE_PATTERN = "(.*)"

# Leading character of capture-style names such as {*path}
CAPTURE_PATTERN_PREFIX = "*"


@dataclass(frozen=True)
class ExactSegmentMatcher:
    """Matches a segment by plain string equality"""

    raw_pattern: str
    case_sensitive: bool = True

    def matches(self, text: str, variables: dict[str, str] | None = None) -> bool:
        if self.case_sensitive:
            return self.raw_pattern == text
        return (
            len(self.raw_pattern) == len(text)
            and self.raw_pattern.lower() == text.lower()
        )


@dataclass(frozen=True)
class GlobSegmentMatcher:
    """Matches a segment against a compiled glob, binding template variables"""

    raw_pattern: str
    regex: Pattern[str]
    variable_names: tuple[str, ...] = field(default_factory=tuple)

    def matches(self, text: str, variables: dict[str, str] | None = None) -> bool:
        """Match text against the whole compiled glob.

        Args:
            text: Path segment to test
            variables: Optional mapping that receives bound variable values

        Returns:
            True if the segment matches

        Raises:
            InconsistentMatchStateError: If capture groups and variable names
                disagree in number
            InvalidArgumentError: If a variable uses capture-style naming
        """
        found = self.regex.fullmatch(text)
        if found is None:
            return False

        if variables is not None:
            if len(self.variable_names) != self.regex.groups:
                raise InconsistentMatchStateError(
                    f"The number of capturing groups in the pattern segment "
                    f"'{self.raw_pattern}' does not match the number of URI template "
                    f"variables it defines, which can occur if capturing groups are "
                    f"used in a URI template regex. Use non-capturing groups instead."
                )
            for name, value in zip(self.variable_names, found.groups()):
                if name.startswith(CAPTURE_PATTERN_PREFIX):
                    raise InvalidArgumentError(
                        f"Capturing patterns ({name}) are not supported by the "
                        f"Ant path matcher"
                    )
                variables[name] = value

        return True


SegmentMatcher = Union[ExactSegmentMatcher, GlobSegmentMatcher]


def _quote(text: str, start: int, end: int) -> str:
    if start == end:
        return ""
    return re.escape(text[start:end])


def compile_segment(segment: str, case_sensitive: bool = True) -> SegmentMatcher:
    """Compile one segment's glob grammar into a matcher.

    Args:
        segment: Raw segment text (never contains the separator)
        case_sensitive: Compare literals case-sensitively

    Returns:
        ExactSegmentMatcher when no glob marker is present, else GlobSegmentMatcher

    Raises:
        InvalidArgumentError: If a custom variable regex does not compile
    """
    parts: list[str] = []
    variable_names: list[str] = []
    end = 0

    for marker in GLOB_PATTERN.finditer(segment):
        parts.append(_quote(segment, end, marker.start()))
        token = marker.group()
        if token == "?":
            parts.append(".")
        elif token == "*":
            parts.append(".*")
        else:
            colon = token.find(":")
            if colon == -1:
                parts.append(DEFAULT_VARIABLE_PATTERN)
                variable_names.append(marker.group(1))
            else:
                parts.append(f"({token[colon + 1:-1]})")
                variable_names.append(token[1:colon])
        end = marker.end()

    if end == 0:
        return ExactSegmentMatcher(segment, case_sensitive)

    parts.append(_quote(segment, end, len(segment)))

    flags = re.DOTALL
    if not case_sensitive:
        flags |= re.IGNORECASE

    try:
        regex = re.compile("".join(parts), flags)
    except re.error as e:
        raise InvalidArgumentError(
            f"Invalid pattern segment '{segment}': {e}"
        ) from e

    return GlobSegmentMatcher(segment, regex, tuple(variable_names))


def match_segment(
    matcher: SegmentMatcher, text: str, variables: dict[str, str] | None = None
) -> bool:
    """Match a path segment with a compiled matcher"""
    return matcher.matches(text, variables)
