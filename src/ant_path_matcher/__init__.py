"""Ant Path Matcher - glob-style route pattern matching."""

import logging

from .base import PathMatcher
from .cache import PatternCache
from .combine import combine_patterns, concat
from .common.exceptions import (
    ConfigurationError,
    InconsistentMatchStateError,
    InvalidArgumentError,
    PathMatcherError,
    PatternMismatchError,
)
from .common.logging import PACKAGE_LOGGER_NAME, get_logger, setup_logging
from .common.utils import has_text, tokenize_to_list
from .comparator import AntPatternComparator, PatternInfo
from .config import (
    CACHE_TURNOFF_THRESHOLD,
    DEFAULT_PATH_SEPARATOR,
    CacheMode,
    MatcherConfig,
)
from .matcher import AntPathMatcher
from .segment import (
    ExactSegmentMatcher,
    GlobSegmentMatcher,
    SegmentMatcher,
    compile_segment,
    match_segment,
)

# Silent until the host application configures logging or calls setup_logging()
_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
if not any(isinstance(h, logging.NullHandler) for h in _package_logger.handlers):
    _package_logger.addHandler(logging.NullHandler())

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Matching
    "PathMatcher",
    "AntPathMatcher",
    "AntPatternComparator",
    "PatternInfo",
    "combine_patterns",
    "concat",
    # Segments
    "SegmentMatcher",
    "ExactSegmentMatcher",
    "GlobSegmentMatcher",
    "compile_segment",
    "match_segment",
    # Caching and configuration
    "PatternCache",
    "MatcherConfig",
    "CacheMode",
    "DEFAULT_PATH_SEPARATOR",
    "CACHE_TURNOFF_THRESHOLD",
    # Exceptions
    "PathMatcherError",
    "InvalidArgumentError",
    "InconsistentMatchStateError",
    "PatternMismatchError",
    "ConfigurationError",
    # Utilities
    "get_logger",
    "setup_logging",
    "has_text",
    "tokenize_to_list",
]
