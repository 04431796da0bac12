"""Phrase dictionary loaded from a phrase store.

The dictionary maps English phrases (and optional phrase keys) to per-language texts and
answers forward (English -> language), reverse (language -> English) and word-by-word
lookups. Loading happens once, lazily, on the first lookup that needs it.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, ClassVar

from core.cache.inflight_manager import InFlightManager
from core.phrases.interface import PhraseStoreError
from models.language_models import DictionaryEntry
from models.translation_models import WordByWordResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.language.registry import LanguageRegistry
    from core.phrases.interface import PhraseRow, PhraseStoreInterface

__all__: list[str] = ["PhraseDictionary"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class PhraseDictionary:
    """In-memory phrase index over a phrase store.

    Store failures never escape `ensure_loaded`: they are logged, the dictionary stays empty
    and not ready, and lookups simply miss. A later call retries once RETRY_INTERVAL_SEC has
    passed since the failure.

    Args:
        store (PhraseStoreInterface): Source of phrase rows.
        language_registry (LanguageRegistry): Maps languages to phrase store columns.
        limit (int): Maximum number of rows fetched from the store.
        clock (Callable[[], float]): Monotonic clock in seconds.

    Attributes:
        LOAD_KEY (ClassVar[str]): In-flight key of the load operation.
        RETRY_INTERVAL_SEC (ClassVar[float]): Minimum delay before retrying a failed load.
    """

    LOAD_KEY: ClassVar[str] = "phrase-dictionary-load"
    RETRY_INTERVAL_SEC: ClassVar[float] = 30.0

    def __init__(
        self,
        store: PhraseStoreInterface,
        language_registry: LanguageRegistry,
        *,
        limit: int = 2000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store: PhraseStoreInterface = store
        self._languages: LanguageRegistry = language_registry
        self._limit: int = limit
        self._clock: Callable[[], float] = clock
        self._index: dict[str, DictionaryEntry] = {}
        self._entries: list[DictionaryEntry] = []
        self._reverse_index: dict[str, dict[str, str]] = {}
        self._ready: bool = False
        self._failed_at: float | None = None
        self._inflight: InFlightManager[bool] = InFlightManager()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def phrase_count(self) -> int:
        """Number of lookup keys indexed, English phrases and phrase keys together."""
        return len(self._index)

    @property
    def store(self) -> PhraseStoreInterface:
        return self._store

    async def ensure_loaded(self) -> bool:
        """Load the phrase store once, sharing the load between concurrent callers.

        Returns:
            bool: True if the dictionary is ready.
        """
        if self._ready:
            return True
        if self._failed_at is not None and self._clock() - self._failed_at < self.RETRY_INTERVAL_SEC:
            return False

        try:
            is_producer, shared = await self._inflight.mark_inflight_start(self.LOAD_KEY)
        except TimeoutError as err:
            logger.warning("Phrase load by another caller did not finish: %s", err)
            return False
        if not is_producer:
            return bool(shared)

        try:
            loaded: bool = await self._load()
        except asyncio.CancelledError:
            # waiting callers are released and the next call starts a fresh load
            self._inflight.abandon_inflight(self.LOAD_KEY)
            raise
        except Exception as err:
            await self._inflight.store_inflight_exception(self.LOAD_KEY, err)
            raise
        else:
            await self._inflight.store_inflight_result(self.LOAD_KEY, loaded)
            return loaded

    async def _load(self) -> bool:
        logger.info("Loading phrases (limit %d)", self._limit)
        try:
            rows: list[PhraseRow] = await self._store.fetch_rows(self._limit)
        except (PhraseStoreError, TimeoutError) as err:
            self._failed_at = self._clock()
            logger.warning("Failed to load phrases, continuing without a phrase dictionary: %s", err)
            return False
        except Exception as err:  # noqa: BLE001 - isolate store failures
            self._failed_at = self._clock()
            logger.warning(
                "Unexpected phrase store failure, continuing without a phrase dictionary: %s: %s",
                err.__class__.__name__,
                err,
            )
            return False

        self._build_index(rows)
        self._ready = True
        self._failed_at = None
        logger.info("Loaded %d phrases", len(self._index))
        return True

    def _build_index(self, rows: list[PhraseRow]) -> None:
        index: dict[str, DictionaryEntry] = {}
        entries: list[DictionaryEntry] = []
        for row in rows:
            entry: DictionaryEntry | None = DictionaryEntry.from_row(row)
            if entry is None:
                logger.debug("Skipped phrase row without English text: %s", row.get("id"))
                continue
            entries.append(entry)
            index[entry.english_key] = entry
            if entry.phrase_key:
                index[entry.phrase_key.lower()] = entry
        self._index = index
        self._entries = entries
        self._reverse_index = {}

    def clear(self) -> None:
        """Drop every phrase and mark the dictionary as not loaded."""
        self._index = {}
        self._entries = []
        self._reverse_index = {}
        self._ready = False
        self._failed_at = None
        logger.info("Phrase dictionary cleared")

    def lookup_forward(self, text: str, target_language: str | None) -> str | None:
        """Look up the text of a phrase in the target language.

        Args:
            text (str): English phrase or phrase key, matched case-insensitively after trimming.
            target_language (str | None): Language whose column to read.

        Returns:
            str | None: The target-language text, or None if the phrase or the column is missing or blank.
        """
        entry: DictionaryEntry | None = self._index.get(StringUtils.normalize_key(text))
        if entry is None:
            return None
        value: str | None = entry.column(self._languages.get_language_column(target_language))
        return value if value and value.strip() else None

    def lookup_reverse(self, text: str, source_language: str | None) -> str | None:
        """Find the English phrase whose source-language column equals the text.

        Comparison is case-insensitive after trimming; the first matching entry wins.

        Args:
            text (str): Phrase in the source language.
            source_language (str | None): Language the text is written in.

        Returns:
            str | None: The English phrase, or None when nothing matches.
        """
        key: str = StringUtils.normalize_key(text)
        if not key:
            return None
        column: str = self._languages.get_language_column(source_language)
        return self._reverse_column(column).get(key)

    def lookup_english(self, text: str) -> str | None:
        """Return the English phrase indexed under an English text or phrase key."""
        entry: DictionaryEntry | None = self._index.get(StringUtils.normalize_key(text))
        return entry.english if entry else None

    def word_by_word(self, text: str, target_language: str | None) -> WordByWordResult:
        """Translate each whitespace-separated token independently.

        Separators are kept exactly; tokens without a dictionary entry are kept unchanged.

        Args:
            text (str): Text to translate.
            target_language (str | None): Target language.

        Returns:
            WordByWordResult: Reassembled text, whether any token was translated and the
            share of translated tokens.
        """
        segments: list[str] = StringUtils.split_preserving_whitespace(text)
        total: int = 0
        translated: int = 0
        output: list[str] = []
        for segment in segments:
            if StringUtils.is_blank(segment):
                output.append(segment)
                continue
            total += 1
            found: str | None = self.lookup_forward(segment, target_language)
            if found is None:
                output.append(segment)
            else:
                translated += 1
                output.append(found)

        return WordByWordResult(
            text="".join(output),
            translated=translated > 0,
            confidence=translated / total if total else 0.0,
        )

    def _reverse_column(self, column: str) -> dict[str, str]:
        reverse: dict[str, str] | None = self._reverse_index.get(column)
        if reverse is None:
            reverse = {}
            for entry in self._entries:
                native: str | None = entry.column(column)
                if native:
                    reverse.setdefault(StringUtils.normalize_key(native), entry.english)
            self._reverse_index[column] = reverse
        return reverse
