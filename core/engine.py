"""Translation engine facade.

`TranslationEngine` wires the language registry, the transliterator, the phrase dictionary,
the result cache, the orchestrator and the chat view builder together. Each engine owns its
own state; two engines share nothing unless they are handed the same phrase store.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import core.phrases.stores  # noqa: F401  # registers the built-in phrase stores
from core.cache.manager import ResultCache
from core.chat.view_builder import ChatViewBuilder
from core.language.registry import LanguageRegistry
from core.phrases.dictionary import PhraseDictionary
from core.phrases.interface import PhraseStoreInterface
from core.script.grammar import GrammarRegistry
from core.script.transliterator import Transliterator
from core.trans.orchestrator import TranslationOrchestrator
from models.cache_models import EngineStats
from models.config_models import Config
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from models.translation_models import ChatMessageView, LanguageProfile, TranslationResult

__all__: list[str] = ["TranslationEngine"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslationEngine:
    """Offline meaning-pivot translation and transliteration engine.

    Args:
        config (Config | None): Engine configuration; defaults apply when None.
        phrase_store (PhraseStoreInterface | None): Phrase source. When None, the store named by
            `PHRASE_STORE.TYPE` is created from the configuration.
        language_registry (LanguageRegistry | None): Language metadata. When None, it is read from
            `LANGUAGES.PATH`, or the packaged list when that is empty.
        clock (Callable[[], float]): Monotonic clock shared by the cache and the dictionary.

    Raises:
        PhraseStoreError: If the configured phrase store type is not registered.
        LanguageRegistryError: If the language metadata file cannot be read.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        phrase_store: PhraseStoreInterface | None = None,
        language_registry: LanguageRegistry | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config: Config = config or Config()
        if language_registry is None:
            language_registry = LanguageRegistry.from_file(
                FileUtils.resolve_path(self._config.LANGUAGES.PATH) if self._config.LANGUAGES.PATH else None,
                self._config.LANGUAGES.ALIASES,
            )
        self._languages: LanguageRegistry = language_registry
        self._grammars: GrammarRegistry = GrammarRegistry.with_builtin(self._languages)
        self._transliterator: Transliterator = Transliterator(self._languages, self._grammars)
        self._store: PhraseStoreInterface = (
            phrase_store if phrase_store is not None else PhraseStoreInterface.create(self._config)
        )
        self._dictionary: PhraseDictionary = PhraseDictionary(
            self._store,
            self._languages,
            limit=self._config.ENGINE.PHRASE_LIMIT,
            clock=clock,
        )
        self._cache: ResultCache = ResultCache(
            self._config.ENGINE.CACHE_MAX_ENTRIES,
            self._config.ENGINE.CACHE_TTL_SEC,
            clock=clock,
        )
        self._orchestrator: TranslationOrchestrator = TranslationOrchestrator(
            self._languages, self._transliterator, self._dictionary, self._cache
        )
        self._view_builder: ChatViewBuilder = ChatViewBuilder(
            self._languages, self._transliterator, self._dictionary, self._orchestrator
        )
        logger.debug("TranslationEngine created with %s", type(self._store).__name__)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def languages(self) -> LanguageRegistry:
        return self._languages

    @property
    def grammars(self) -> GrammarRegistry:
        return self._grammars

    @property
    def transliterator(self) -> Transliterator:
        return self._transliterator

    @property
    def dictionary(self) -> PhraseDictionary:
        return self._dictionary

    @property
    def cache(self) -> ResultCache:
        return self._cache

    @property
    def orchestrator(self) -> TranslationOrchestrator:
        return self._orchestrator

    async def component_load(self) -> None:
        """Load the phrase dictionary ahead of the first request."""
        await self.initialize_engine()
        logger.debug("'%s' component loaded", self.__class__.__name__)

    async def component_teardown(self) -> None:
        """Release the phrase store."""
        await self._store.close()
        logger.debug("'%s' component unloaded", self.__class__.__name__)

    async def initialize_engine(self) -> bool:
        """Load the phrase dictionary.

        Returns:
            bool: True if the dictionary is ready; False when the store failed, in which case
            the engine keeps working on transliteration alone.
        """
        ready: bool = await self._dictionary.ensure_loaded()
        if ready:
            logger.info("Translation engine ready with %d phrases", self._dictionary.phrase_count)
        else:
            logger.warning("Translation engine running without a phrase dictionary")
        return ready

    def is_engine_ready(self) -> bool:
        return self._dictionary.is_ready

    async def translate(
        self, text: str, source_language: str | None, target_language: str | None
    ) -> TranslationResult:
        """Translate text between two languages through the English pivot.

        Args:
            text (str): Text to translate.
            source_language (str | None): Source language name, alias or code.
            target_language (str | None): Target language name, alias or code.

        Returns:
            TranslationResult: The translation.
        """
        return await self._orchestrator.translate(text, source_language, target_language)

    def transliterate_to_native(self, text: str, target_language: str | None) -> str:
        return self._transliterator.to_native(text, target_language)

    def reverse_transliterate(self, text: str, source_language: str | None) -> str:
        return self._transliterator.to_latin(text, source_language)

    async def build_chat_view(
        self, text: str, sender_profile: LanguageProfile, receiver_profile: LanguageProfile
    ) -> ChatMessageView:
        return await self._view_builder.build(text, sender_profile, receiver_profile)

    async def build_simple_chat_view(
        self, text: str, sender_language: str | None, receiver_language: str | None
    ) -> ChatMessageView:
        return await self._view_builder.build_simple(text, sender_language, receiver_language)

    def native_preview(self, text: str, target_language: str | None) -> str:
        """Native-script preview of romanized text while it is being typed."""
        return self._transliterator.live_preview(text, target_language)

    async def english_preview(self, text: str, source_language: str | None) -> str:
        return await self._orchestrator.english_preview(text, source_language)

    def clear_cache(self) -> None:
        """Drop every cached translation result."""
        self._cache.clear()

    def clear_phrase_cache(self) -> None:
        """Drop the phrase dictionary; the next request reloads it from the store."""
        self._dictionary.clear()

    def get_cache_stats(self) -> EngineStats:
        """Get the number of cached results and indexed phrases.

        Returns:
            EngineStats: Result count, phrase count and dictionary readiness.
        """
        return EngineStats(
            result_count=self._cache.size,
            phrase_count=self._dictionary.phrase_count,
            ready=self._dictionary.is_ready,
        )
