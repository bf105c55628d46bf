"""Engine-owned caches for tokenized patterns and compiled segments."""

import threading
from collections.abc import Callable
from typing import TypeVar

from .common.logging import get_logger
from .config import CACHE_TURNOFF_THRESHOLD, CacheMode
from .segment import SegmentMatcher

logger = get_logger(__name__)

T = TypeVar("T")


class PatternCache:
    """Memoizes pattern tokenization and segment compilation.

    In AUTO mode the cache turns itself off for good once either store
    reaches the threshold, which bounds memory when callers feed in an
    unbounded number of distinct patterns. Lookups never take a lock; two
    threads compiling the same key concurrently both produce equivalent
    values and the first one published wins.
    """

    def __init__(
        self,
        mode: CacheMode = CacheMode.AUTO,
        threshold: int = CACHE_TURNOFF_THRESHOLD,
    ) -> None:
        self._mode = mode
        self._threshold = threshold
        self._enabled = mode is not CacheMode.OFF
        self._deactivate_lock = threading.Lock()
        self._tokenized: dict[str, tuple[str, ...]] = {}
        self._segments: dict[str, SegmentMatcher] = {}

    @property
    def mode(self) -> CacheMode:
        return self._mode

    @property
    def enabled(self) -> bool:
        """Whether lookups and insertions currently go through the cache"""
        return self._enabled

    @property
    def tokenized_count(self) -> int:
        return len(self._tokenized)

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._tokenized) + len(self._segments)

    def tokenized(
        self, pattern: str, factory: Callable[[str], tuple[str, ...]]
    ) -> tuple[str, ...]:
        """Get the segments of a pattern, tokenizing it on a miss"""
        return self._get_or_create(self._tokenized, pattern, factory)

    def segment(
        self, segment: str, factory: Callable[[str], SegmentMatcher]
    ) -> SegmentMatcher:
        """Get the compiled matcher of a segment, compiling it on a miss"""
        return self._get_or_create(self._segments, segment, factory)

    def _get_or_create(
        self, store: dict[str, T], key: str, factory: Callable[[str], T]
    ) -> T:
        enabled = self._enabled
        if enabled:
            cached = store.get(key)
            if cached is not None:
                return cached

        value = factory(key)
        if not enabled:
            return value

        if self._mode is CacheMode.AUTO and len(store) >= self._threshold:
            self.deactivate()
            return value

        return store.setdefault(key, value)

    def deactivate(self) -> None:
        """Turn the cache off permanently and drop every entry"""
        with self._deactivate_lock:
            if not self._enabled and not self._tokenized and not self._segments:
                return
            self._enabled = False
            dropped = len(self)
            self._tokenized.clear()
            self._segments.clear()

        logger.warning(
            "Pattern cache deactivated",
            dropped_entries=dropped,
            threshold=self._threshold,
        )
