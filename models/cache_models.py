"""Models for the translation result cache.

Defines the cache entry wrapper, cache statistics and the engine-level statistics
reported to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = [
    "CacheEntry",
    "CacheStatistics",
    "EngineStats",
]

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """Cached value with its insertion time.

    Attributes:
        data (T): Cached value.
        inserted_at (float): Monotonic timestamp of insertion, in seconds.
    """

    data: T
    inserted_at: float


@dataclass
class CacheStatistics:
    """Result cache usage statistics.

    Attributes:
        total_entries (int): Entries currently held.
        max_entries (int): Size bound.
        ttl_sec (float): Entry lifetime in seconds.
        hits (int): Lookups served from the cache.
        misses (int): Lookups that found nothing usable.
        evictions (int): Entries dropped because the cache was full.
        expirations (int): Entries dropped because they outlived the TTL.
    """

    total_entries: int = 0
    max_entries: int = 0
    ttl_sec: float = 0.0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class EngineStats(DataClassJsonMixin):
    """Engine statistics exposed to collaborators.

    Attributes:
        result_count (int): Translation results currently cached.
        phrase_count (int): Phrase keys indexed by the dictionary.
        ready (bool): Whether the phrase dictionary finished loading.
    """

    result_count: int = 0
    phrase_count: int = 0
    ready: bool = False
