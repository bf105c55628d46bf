"""Merging of two pattern fragments into one pattern."""

from collections.abc import Callable

from .common.exceptions import InvalidArgumentError
from .common.logging import get_logger
from .common.utils import has_text
from .config import MatcherConfig

logger = get_logger(__name__)

EXTENSION_GLOB = "*."


def concat(path1: str, path2: str, separator: str) -> str:
    """Join two paths with exactly one separator between them"""
    path1_ends_with_separator = path1.endswith(separator)
    path2_starts_with_separator = path2.startswith(separator)

    if path1_ends_with_separator and path2_starts_with_separator:
        return path1 + path2[len(separator):]
    elif path1_ends_with_separator or path2_starts_with_separator:
        return path1 + path2
    return path1 + separator + path2


def _is_any_extension(extension: str) -> bool:
    return extension == ".*" or extension == ""


def combine_patterns(
    pattern1: str | None,
    pattern2: str | None,
    config: MatcherConfig,
    match: Callable[[str, str], bool],
) -> str:
    """Combine two patterns into a new pattern.

    Examples with the default separator:

    - ``/hotels/*`` + ``/booking`` -> ``/hotels/booking``
    - ``/hotels/**`` + ``/booking`` -> ``/hotels/**/booking``
    - ``/hotels`` + ``/{hotel}`` -> ``/hotels/{hotel}``
    - ``/*.html`` + ``/hotel`` -> ``/hotel.html``

    Args:
        pattern1: First pattern, usually the broader one
        pattern2: Second pattern
        config: Matcher configuration providing the separator
        match: Full-match function used to detect narrowing

    Returns:
        The combined pattern

    Raises:
        InvalidArgumentError: If both patterns carry incompatible extensions
    """
    if not has_text(pattern1) and not has_text(pattern2):
        return ""
    if not has_text(pattern1):
        return pattern2  # type: ignore[return-value]
    if not has_text(pattern2):
        return pattern1  # type: ignore[return-value]

    separator = config.path_separator
    pattern1_contains_uri_var = "{" in pattern1

    # /* + /hotel -> /hotel ; "/*.*" + "/*.html" -> /*.html
    if pattern1 != pattern2 and not pattern1_contains_uri_var and match(pattern1, pattern2):
        return pattern2

    # /hotels/* + /booking -> /hotels/booking
    if pattern1.endswith(config.ends_on_wildcard):
        return concat(pattern1[: -len(config.ends_on_wildcard)], pattern2, separator)

    # /hotels/** + /booking -> /hotels/**/booking
    if pattern1.endswith(config.ends_on_double_wildcard):
        return concat(pattern1, pattern2, separator)

    star_dot_pos1 = pattern1.find(EXTENSION_GLOB)
    if pattern1_contains_uri_var or star_dot_pos1 == -1 or separator == ".":
        return concat(pattern1, pattern2, separator)

    ext1 = pattern1[star_dot_pos1 + 1:]
    dot_pos2 = pattern2.find(".")
    file2 = pattern2 if dot_pos2 == -1 else pattern2[:dot_pos2]
    ext2 = "" if dot_pos2 == -1 else pattern2[dot_pos2:]

    ext1_all = _is_any_extension(ext1)
    ext2_all = _is_any_extension(ext2)
    if not ext1_all and not ext2_all and ext1 != ext2:
        logger.debug("Incompatible extensions", pattern1=pattern1, pattern2=pattern2)
        raise InvalidArgumentError(
            f"Cannot combine patterns: {pattern1} vs {pattern2}"
        )

    extension = ext2 if ext1_all else ext1
    return file2 + extension
