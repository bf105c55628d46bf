"""Ant-style path matcher.

Mapping rules:

- ``?`` matches one character
- ``*`` matches zero or more characters within a segment
- ``**`` matches zero or more segments
- ``{name:[a-z]+}`` matches ``[a-z]+`` and binds it to the variable ``name``

Examples:

- ``com/t?st.jsp`` matches ``com/test.jsp``, ``com/tast.jsp`` or ``com/txst.jsp``
- ``com/*.jsp`` matches all ``.jsp`` files in the ``com`` directory
- ``com/**/test.jsp`` matches all ``test.jsp`` files underneath ``com``
- ``org/**/servlet/bla.jsp`` matches ``org/servlet/bla.jsp`` as well as
  ``org/springframework/testing/servlet/bla.jsp``
- ``com/{filename:\\w+}.jsp`` matches ``com/test.jsp`` and binds ``filename``
  to ``test``

A pattern and a path must both be absolute or both be relative to match.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .cache import PatternCache
from .combine import combine_patterns
from .common.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    PatternMismatchError,
)
from .common.logging import get_logger
from .common.utils import tokenize_to_list
from .comparator import AntPatternComparator
from .config import DEFAULT_PATH_SEPARATOR, CacheMode, MatcherConfig
from .segment import SegmentMatcher, compile_segment

logger = get_logger(__name__)

DOUBLE_WILDCARD = "**"
WILDCARD_CHARS = frozenset("*?{")


class AntPathMatcher:
    """PathMatcher implementation for Ant-style path patterns.

    Instances are safe to share between threads: the only mutable state is
    the pattern cache, which tolerates concurrent population.
    """

    def __init__(self, config: MatcherConfig | None = None, **overrides: Any) -> None:
        """Initialize the matcher.

        Args:
            config: Matcher configuration (defaults used if omitted)
            **overrides: Individual MatcherConfig fields to override

        Raises:
            pydantic.ValidationError: If an override is invalid
        """
        if config is None:
            config = MatcherConfig(**overrides)
        else:
            config = MatcherConfig(**{**config.model_dump(), **overrides})

        self._config = config
        self._cache = self._new_cache()

        logger.debug(
            "AntPathMatcher initialized",
            path_separator=config.path_separator,
            case_sensitive=config.case_sensitive,
            trim_tokens=config.trim_tokens,
            cache_mode=config.cache_mode.value,
        )

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "AntPathMatcher":
        """Create a matcher from a plain settings mapping.

        Raises:
            ConfigurationError: If the settings are invalid
        """
        try:
            config = MatcherConfig.model_validate(dict(settings))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid matcher configuration: {e}") from e
        return cls(config)

    @property
    def config(self) -> MatcherConfig:
        """Copy of the active configuration"""
        return self._config.model_copy()

    @property
    def cache(self) -> PatternCache:
        return self._cache

    @property
    def path_separator(self) -> str:
        return self._config.path_separator

    def _new_cache(self) -> PatternCache:
        return PatternCache(self._config.cache_mode, self._config.cache_threshold)

    def _reconfigure(self, **changes: Any) -> None:
        self._config = MatcherConfig(**{**self._config.model_dump(), **changes})
        self._cache = self._new_cache()

    def set_path_separator(self, path_separator: str | None) -> None:
        """Set the separator, falling back to the default for None"""
        self._reconfigure(path_separator=path_separator or DEFAULT_PATH_SEPARATOR)

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        self._reconfigure(case_sensitive=case_sensitive)

    def set_trim_tokens(self, trim_tokens: bool) -> None:
        self._reconfigure(trim_tokens=trim_tokens)

    def set_cache_patterns(self, cache_patterns: bool | None) -> None:
        """Force caching on or off, or pass None for automatic mode"""
        if cache_patterns is None:
            mode = CacheMode.AUTO
        else:
            mode = CacheMode.ON if cache_patterns else CacheMode.OFF
        self._reconfigure(cache_mode=mode)

    def is_pattern(self, path: str | None) -> bool:
        if path is None:
            return False
        uri_var = False
        for char in path:
            if char == "*" or char == "?":
                return True
            if char == "{":
                uri_var = True
                continue
            if char == "}" and uri_var:
                return True
        return False

    def match(self, pattern: str, path: str | None) -> bool:
        return self.do_match(pattern, path, True, None)

    def match_start(self, pattern: str, path: str | None) -> bool:
        return self.do_match(pattern, path, False, None)

    def do_match(
        self,
        pattern: str,
        path: str | None,
        full_match: bool,
        uri_template_variables: dict[str, str] | None = None,
    ) -> bool:
        """Match the given path against the given pattern.

        Args:
            pattern: Pattern to match against
            path: Path to test
            full_match: Whether the whole path must match (otherwise a
                pattern prefix match is enough)
            uri_template_variables: Optional mapping receiving bound variables

        Returns:
            True if the path matched

        Raises:
            InvalidArgumentError: If the pattern is None
        """
        if pattern is None:
            raise InvalidArgumentError("Pattern cannot be None")

        separator = self._config.path_separator
        if path is None or path.startswith(separator) != pattern.startswith(separator):
            return False

        patt_dirs = self.tokenize_pattern(pattern)
        if (
            full_match
            and self._config.case_sensitive
            and not self._is_potential_match(path, patt_dirs)
        ):
            return False

        path_dirs = self.tokenize_path(path)
        patt_idx_start = 0
        patt_idx_end = len(patt_dirs) - 1
        path_idx_start = 0
        path_idx_end = len(path_dirs) - 1

        # Match all segments up to the first **
        while patt_idx_start <= patt_idx_end and path_idx_start <= path_idx_end:
            patt_dir = patt_dirs[patt_idx_start]
            if patt_dir == DOUBLE_WILDCARD:
                break
            if not self._match_strings(
                patt_dir, path_dirs[path_idx_start], uri_template_variables
            ):
                return False
            patt_idx_start += 1
            path_idx_start += 1

        if path_idx_start > path_idx_end:
            # Path is exhausted, only match if rest of pattern is * or **'s
            if patt_idx_start > patt_idx_end:
                return pattern.endswith(separator) == path.endswith(separator)
            if not full_match:
                return True
            if (
                patt_idx_start == patt_idx_end
                and patt_dirs[patt_idx_start] == "*"
                and path.endswith(separator)
            ):
                return True
            return self._only_double_wildcards(patt_dirs, patt_idx_start, patt_idx_end)
        elif patt_idx_start > patt_idx_end:
            # String not exhausted, but pattern is
            return False
        elif not full_match and patt_dirs[patt_idx_start] == DOUBLE_WILDCARD:
            # Path start definitely matches due to "**" part in pattern
            return True

        # Match all segments from the end up to the last **
        while patt_idx_start <= patt_idx_end and path_idx_start <= path_idx_end:
            patt_dir = patt_dirs[patt_idx_end]
            if patt_dir == DOUBLE_WILDCARD:
                break
            if not self._match_strings(
                patt_dir, path_dirs[path_idx_end], uri_template_variables
            ):
                return False
            if patt_idx_end == len(patt_dirs) - 1 and pattern.endswith(
                separator
            ) != path.endswith(separator):
                return False
            patt_idx_end -= 1
            path_idx_end -= 1

        if path_idx_start > path_idx_end:
            return self._only_double_wildcards(patt_dirs, patt_idx_start, patt_idx_end)

        while patt_idx_start != patt_idx_end and path_idx_start <= path_idx_end:
            patt_idx_tmp = -1
            for i in range(patt_idx_start + 1, patt_idx_end + 1):
                if patt_dirs[i] == DOUBLE_WILDCARD:
                    patt_idx_tmp = i
                    break
            if patt_idx_tmp == patt_idx_start + 1:
                # '**/**' situation, so skip one
                patt_idx_start += 1
                continue

            # Find the leftmost placement of the segments between the two **
            pat_length = patt_idx_tmp - patt_idx_start - 1
            str_length = path_idx_end - path_idx_start + 1
            found_idx = self._find_run(
                patt_dirs[patt_idx_start + 1:patt_idx_tmp],
                path_dirs,
                path_idx_start,
                str_length - pat_length,
                uri_template_variables,
            )
            if found_idx == -1:
                return False

            patt_idx_start = patt_idx_tmp
            path_idx_start = found_idx + pat_length

        return self._only_double_wildcards(patt_dirs, patt_idx_start, patt_idx_end)

    def _find_run(
        self,
        run: list[str] | tuple[str, ...],
        path_dirs: list[str],
        path_idx_start: int,
        max_offset: int,
        uri_template_variables: dict[str, str] | None,
    ) -> int:
        for offset in range(max_offset + 1):
            start = path_idx_start + offset
            if all(
                self._match_strings(sub_pat, path_dirs[start + j], uri_template_variables)
                for j, sub_pat in enumerate(run)
            ):
                return start
        return -1

    @staticmethod
    def _only_double_wildcards(
        patt_dirs: tuple[str, ...], start: int, end: int
    ) -> bool:
        return all(patt_dirs[i] == DOUBLE_WILDCARD for i in range(start, end + 1))

    def _is_potential_match(self, path: str, patt_dirs: tuple[str, ...]) -> bool:
        if not self._config.trim_tokens:
            pos = 0
            for patt_dir in patt_dirs:
                pos += self._skip_separator(path, pos)
                skipped = self._skip_segment(path, pos, patt_dir)
                if skipped < len(patt_dir):
                    return skipped > 0 or (
                        len(patt_dir) > 0 and patt_dir[0] in WILDCARD_CHARS
                    )
                pos += skipped
        return True

    @staticmethod
    def _skip_segment(path: str, pos: int, prefix: str) -> int:
        skipped = 0
        for char in prefix:
            if char in WILDCARD_CHARS:
                return skipped
            curr_pos = pos + skipped
            if curr_pos >= len(path):
                return 0
            if char == path[curr_pos]:
                skipped += 1
        return skipped

    def _skip_separator(self, path: str, pos: int) -> int:
        separator = self._config.path_separator
        skipped = 0
        while path.startswith(separator, pos + skipped):
            skipped += len(separator)
        return skipped

    def tokenize_pattern(self, pattern: str) -> tuple[str, ...]:
        """Tokenize a pattern into segments, using the cache where enabled"""
        return self._cache.tokenized(pattern, lambda p: tuple(self.tokenize_path(p)))

    def tokenize_path(self, path: str) -> list[str]:
        return tokenize_to_list(
            path, self._config.path_separator, self._config.trim_tokens, True
        )

    def get_string_matcher(self, pattern: str) -> SegmentMatcher:
        """Get the compiled matcher for one pattern segment"""
        case_sensitive = self._config.case_sensitive
        return self._cache.segment(
            pattern, lambda segment: compile_segment(segment, case_sensitive)
        )

    def _match_strings(
        self, pattern: str, text: str, uri_template_variables: dict[str, str] | None
    ) -> bool:
        return self.get_string_matcher(pattern).matches(text, uri_template_variables)

    def extract_path_within_pattern(self, pattern: str, path: str) -> str:
        """Given a pattern and a full path, determine the pattern-mapped part.

        For example:

        - ``/docs/cvs/commit.html`` and ``/docs/cvs/commit.html`` -> ``""``
        - ``/docs/*`` and ``/docs/cvs/commit`` -> ``cvs/commit``
        - ``/docs/cvs/*.html`` and ``/docs/cvs/commit.html`` -> ``commit.html``
        - ``/docs/**`` and ``/docs/cvs/commit`` -> ``cvs/commit``
        - ``/*.html`` and ``/docs/cvs/commit.html`` -> ``docs/cvs/commit.html``
        - ``*`` and ``/docs/cvs/commit`` -> ``/docs/cvs/commit``

        Assumes that ``match`` returns True for the pattern and path but
        does not enforce it.
        """
        separator = self._config.path_separator
        pattern_parts = self.tokenize_path(pattern)
        path_parts = self.tokenize_path(path)
        builder: list[str] = []
        path_started = False

        segment = 0
        while segment < len(pattern_parts):
            pattern_part = pattern_parts[segment]
            if "*" in pattern_part or "?" in pattern_part:
                while segment < len(path_parts):
                    if path_started or (
                        segment == 0 and not pattern.startswith(separator)
                    ):
                        builder.append(separator)
                    builder.append(path_parts[segment])
                    path_started = True
                    segment += 1
            segment += 1

        return "".join(builder)

    def extract_uri_template_variables(self, pattern: str, path: str) -> dict[str, str]:
        """Extract the URI template variables bound by pattern in path.

        Raises:
            PatternMismatchError: If the pattern does not match the path
        """
        variables: dict[str, str] = {}
        if not self.do_match(pattern, path, True, variables):
            logger.debug("Template variable extraction failed", pattern=pattern, path=path)
            raise PatternMismatchError(pattern, path)
        return variables

    def get_pattern_comparator(self, path: str) -> AntPatternComparator:
        """Return a comparator ordering patterns by specificity for path.

        The most specific pattern sorts first; the catch-all sorts last.
        """
        return AntPatternComparator(path, self._config.path_separator)

    def combine(self, pattern1: str | None, pattern2: str | None) -> str:
        return combine_patterns(pattern1, pattern2, self._config, self.match)

    def __repr__(self) -> str:
        return f"AntPathMatcher(path_separator='{self._config.path_separator}')"
