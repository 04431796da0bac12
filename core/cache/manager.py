"""Translation result cache manager.

Keeps recent translation results in memory, keyed by a SHA-256 digest of the normalized
request. Entries expire after a TTL and the oldest entry is evicted once the cache is full.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, ClassVar

from models.cache_models import CacheEntry, CacheStatistics
from models.translation_models import TranslationMethod, TranslationResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

__all__: list[str] = ["ResultCache"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ResultCache:
    """Bounded, insertion-ordered translation result cache with a TTL.

    Expired entries are removed lazily when they are read. When the cache is full the entry
    inserted first is evicted, regardless of how often it was read.

    Args:
        max_entries (int): Size bound.
        ttl_sec (float): Entry lifetime in seconds.
        clock (Callable[[], float]): Monotonic clock in seconds, injectable for tests.

    Attributes:
        MAX_ENTRIES (ClassVar[int]): Default size bound.
        TTL_SEC (ClassVar[float]): Default entry lifetime in seconds.
    """

    MAX_ENTRIES: ClassVar[int] = 5000
    TTL_SEC: ClassVar[float] = 60.0

    def __init__(
        self,
        max_entries: int = MAX_ENTRIES,
        ttl_sec: float = TTL_SEC,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_entries: int = max(1, max_entries)
        self._ttl_sec: float = ttl_sec
        self._clock: Callable[[], float] = clock
        # dicts keep insertion order, so the first key is always the oldest entry
        self._entries: dict[str, CacheEntry[TranslationResult]] = {}
        self._hits: int = 0
        self._misses: int = 0
        self._evictions: int = 0
        self._expirations: int = 0
        logger.debug("ResultCache created (max_entries=%d, ttl_sec=%.1f)", self._max_entries, self._ttl_sec)

    @staticmethod
    def make_key(text: str, source_language: str, target_language: str) -> str:
        """Build the cache key of a translation request.

        Args:
            text (str): Trimmed source text; NFC-normalized here.
            source_language (str): Normalized source language key.
            target_language (str): Normalized target language key.

        Returns:
            str: Hex SHA-256 digest.
        """
        return StringUtils.generate_hash_key(StringUtils.normalize_text(text), source_language, target_language)

    def get(self, key: str) -> TranslationResult | None:
        """Return a copy of a cached result tagged with method 'cached'.

        Args:
            key (str): Cache key from make_key().

        Returns:
            TranslationResult | None: The cached result, or None on a miss or an expired entry.
        """
        entry: CacheEntry[TranslationResult] | None = self._entries.get(key)
        if entry is None:
            self._misses += 1
            logger.debug("Cache miss for key: %s", key[:16])
            return None

        if self._clock() - entry.inserted_at >= self._ttl_sec:
            del self._entries[key]
            self._expirations += 1
            self._misses += 1
            logger.debug("Cache entry expired for key: %s", key[:16])
            return None

        self._hits += 1
        logger.debug("Cache hit for key: %s", key[:16])
        return entry.data.tagged(TranslationMethod.CACHED)

    def set(self, key: str, result: TranslationResult) -> None:
        """Store a result, evicting the oldest entry when the cache is full.

        Re-storing an existing key refreshes its value and its position.

        Args:
            key (str): Cache key from make_key().
            result (TranslationResult): Result to store.
        """
        self._entries.pop(key, None)
        while len(self._entries) >= self._max_entries:
            oldest: str = next(iter(self._entries))
            del self._entries[oldest]
            self._evictions += 1
            logger.debug("Evicted oldest cache entry: %s", oldest[:16])
        self._entries[key] = CacheEntry(data=result, inserted_at=self._clock())
        logger.debug("Result cached for key: %s", key[:16])

    def clear(self) -> None:
        count: int = len(self._entries)
        self._entries.clear()
        logger.info("Result cache cleared (%d entries)", count)

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def statistics(self) -> CacheStatistics:
        """Get cache usage statistics.

        Returns:
            CacheStatistics: Current counters.
        """
        return CacheStatistics(
            total_entries=len(self._entries),
            max_entries=self._max_entries,
            ttl_sec=self._ttl_sec,
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            expirations=self._expirations,
        )
