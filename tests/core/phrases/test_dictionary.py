from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest

from core.language.registry import LanguageRegistry
from core.phrases.dictionary import PhraseDictionary
from core.phrases.interface import PhraseRow, PhraseStoreInterface, PhraseStoreUnavailableError
from core.phrases.stores.memory_store import MemoryPhraseStore

if TYPE_CHECKING:
    from models.config_models import Config
    from models.translation_models import WordByWordResult

ROWS: list[PhraseRow] = [
    {"id": 1, "english": "Hello", "phrase_key": "greeting_hello", "hindi": "नमस्ते", "spanish": "hola"},
    {"id": 2, "english": "friend", "hindi": "दोस्त", "spanish": "amigo", "tamil": "  "},
    {"id": 3, "english": "water", "hindi": "पानी", "spanish": "agua"},
    {"id": 4, "english": "hi", "hindi": "नमस्ते"},
    {"id": 5, "english": "", "hindi": "खाली"},
]


class CountingStore(PhraseStoreInterface):
    """Store double that counts fetches and can be told to fail."""

    def __init__(self, rows: list[PhraseRow], *, fail: bool = False, delay: float = 0.0) -> None:
        self.rows: list[PhraseRow] = rows
        self.fail: bool = fail
        self.delay: float = delay
        self.fetch_count: int = 0

    @staticmethod
    def fetch_store_name() -> str:
        return ""

    def initialize(self, config: Config) -> None:
        _ = config

    async def fetch_rows(self, limit: int) -> list[PhraseRow]:
        self.fetch_count += 1
        await asyncio.sleep(self.delay)
        if self.fail:
            msg = "store offline"
            raise PhraseStoreUnavailableError(msg)
        return self.rows[:limit]


class FakeClock:
    def __init__(self) -> None:
        self.now: float = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture(scope="module")
def languages() -> LanguageRegistry:
    return LanguageRegistry.from_file()


@pytest.fixture
async def dictionary(languages: LanguageRegistry) -> PhraseDictionary:
    phrases = PhraseDictionary(MemoryPhraseStore(ROWS), languages)
    await phrases.ensure_loaded()
    return phrases


async def test_ensure_loaded_indexes_rows(dictionary: PhraseDictionary) -> None:
    assert dictionary.is_ready is True
    # four English phrases plus one phrase key; the row without English is skipped
    assert dictionary.phrase_count == 5


async def test_concurrent_first_callers_share_one_fetch(languages: LanguageRegistry) -> None:
    store = CountingStore(ROWS, delay=0.01)
    phrases = PhraseDictionary(store, languages)

    results: list[bool] = await asyncio.gather(*(phrases.ensure_loaded() for _ in range(5)))

    assert results == [True] * 5
    assert store.fetch_count == 1

    await phrases.ensure_loaded()
    assert store.fetch_count == 1


async def test_failing_store_is_absorbed(languages: LanguageRegistry, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="PivotChat")
    phrases = PhraseDictionary(CountingStore(ROWS, fail=True), languages)

    assert await phrases.ensure_loaded() is False
    assert phrases.is_ready is False
    assert phrases.lookup_forward("hello", "hindi") is None
    assert any("Failed to load phrases" in rec.message for rec in caplog.records)


async def test_failed_load_is_retried_after_interval(languages: LanguageRegistry) -> None:
    clock = FakeClock()
    store = CountingStore(ROWS, fail=True)
    phrases = PhraseDictionary(store, languages, clock=clock)

    assert await phrases.ensure_loaded() is False
    assert await phrases.ensure_loaded() is False
    assert store.fetch_count == 1

    store.fail = False
    clock.now += PhraseDictionary.RETRY_INTERVAL_SEC
    assert await phrases.ensure_loaded() is True
    assert store.fetch_count == 2


async def test_limit_bounds_the_fetch(languages: LanguageRegistry) -> None:
    phrases = PhraseDictionary(MemoryPhraseStore(ROWS), languages, limit=1)
    await phrases.ensure_loaded()

    assert phrases.lookup_forward("hello", "hindi") == "नमस्ते"
    assert phrases.lookup_forward("water", "hindi") is None


async def test_lookup_forward(dictionary: PhraseDictionary) -> None:
    assert dictionary.lookup_forward("  HELLO ", "hindi") == "नमस्ते"
    assert dictionary.lookup_forward("greeting_hello", "spanish") == "hola"
    assert dictionary.lookup_forward("hello", "english") == "Hello"
    # blank column
    assert dictionary.lookup_forward("friend", "tamil") is None
    assert dictionary.lookup_forward("goodbye", "hindi") is None


async def test_lookup_forward_uses_dialect_column(dictionary: PhraseDictionary) -> None:
    assert dictionary.lookup_forward("water", "bhojpuri") == "पानी"


async def test_lookup_reverse_first_entry_wins(dictionary: PhraseDictionary) -> None:
    assert dictionary.lookup_reverse("नमस्ते", "hindi") == "Hello"
    assert dictionary.lookup_reverse("AGUA", "spanish") == "water"
    assert dictionary.lookup_reverse("नमस्ते", "tamil") is None
    assert dictionary.lookup_reverse("", "hindi") is None


async def test_lookup_english(dictionary: PhraseDictionary) -> None:
    assert dictionary.lookup_english("greeting_hello") == "Hello"
    assert dictionary.lookup_english("unknown") is None


async def test_word_by_word_keeps_separators(dictionary: PhraseDictionary) -> None:
    result: WordByWordResult = dictionary.word_by_word("friend  water xyz", "hindi")

    assert result.text == "दोस्त  पानी xyz"
    assert result.translated is True
    assert result.confidence == pytest.approx(2 / 3)


async def test_word_by_word_without_hits(dictionary: PhraseDictionary) -> None:
    result: WordByWordResult = dictionary.word_by_word("xyz abc", "hindi")

    assert result.text == "xyz abc"
    assert result.translated is False
    assert result.confidence == 0.0


async def test_word_by_word_of_blank_text(dictionary: PhraseDictionary) -> None:
    result: WordByWordResult = dictionary.word_by_word("   ", "hindi")

    assert result.text == "   "
    assert result.confidence == 0.0


async def test_clear_drops_phrases(dictionary: PhraseDictionary) -> None:
    dictionary.clear()

    assert dictionary.is_ready is False
    assert dictionary.phrase_count == 0
    assert dictionary.lookup_forward("hello", "hindi") is None

    assert await dictionary.ensure_loaded() is True
    assert dictionary.lookup_forward("hello", "hindi") == "नमस्ते"


async def test_unexpected_store_error_is_absorbed(languages: LanguageRegistry) -> None:
    store = MemoryPhraseStore()
    error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    store.fetch_rows = AsyncMock(side_effect=error)  # type: ignore[method-assign]
    phrases = PhraseDictionary(store, languages)

    assert await phrases.ensure_loaded() is False
    assert phrases.is_ready is False


async def test_cancelled_load_does_not_block_later_callers(languages: LanguageRegistry) -> None:
    store = CountingStore(ROWS, delay=0.5)
    phrases = PhraseDictionary(store, languages)

    first: asyncio.Task[bool] = asyncio.create_task(phrases.ensure_loaded())
    await asyncio.sleep(0.05)
    waiting: asyncio.Task[bool] = asyncio.create_task(phrases.ensure_loaded())
    await asyncio.sleep(0.05)
    first.cancel()

    with pytest.raises(asyncio.CancelledError):
        await first
    assert await asyncio.wait_for(waiting, timeout=2.0) is False

    store.delay = 0.0
    assert await asyncio.wait_for(phrases.ensure_loaded(), timeout=2.0) is True
    assert store.fetch_count == 2
