"""Meaning-pivot translation of one text between two languages.

Every request is classified into one of seven directions. Direct directions look the text
up in the phrase dictionary; bridged directions first derive an English pivot from the source
text and then translate the pivot. Whenever the dictionary has no answer the result falls
back to word-by-word lookup and script conversion, so a caller always gets displayable text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from core.language.classifier import ScriptClassifier
from core.trans.direction import resolve_direction
from models.translation_models import TranslationDirection, TranslationMethod, TranslationResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from core.cache.manager import ResultCache
    from core.language.registry import LanguageRegistry
    from core.phrases.dictionary import PhraseDictionary
    from core.script.transliterator import Transliterator
    from models.translation_models import WordByWordResult

__all__: list[str] = ["TranslationOrchestrator", "TranslationRequest"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    """Normalized view of one translate call shared by the direction handlers.

    Attributes:
        text (str): Trimmed input text.
        source (str): Normalized source language key.
        target (str): Normalized target language key.
        input_is_latin (bool): Whether the input text is primarily Latin script.
        target_is_latin (bool): Whether the target language is written in Latin script.
    """

    text: str
    source: str
    target: str
    input_is_latin: bool
    target_is_latin: bool

    def result(self, direction: TranslationDirection, text: str, **kwargs) -> TranslationResult:
        return TranslationResult(
            text=text,
            original_text=self.text,
            source_language=self.source,
            target_language=self.target,
            direction=direction,
            **kwargs,
        )


class TranslationOrchestrator:
    """Translate text using the phrase dictionary, the transliterator and the result cache.

    Args:
        language_registry (LanguageRegistry): Language normalization and script properties.
        transliterator (Transliterator): Script converter.
        dictionary (PhraseDictionary): Phrase lookups; loaded on first use.
        cache (ResultCache): Result cache.

    Attributes:
        ENGLISH_SOURCE_PHRASE_CONFIDENCE (ClassVar[float]): English source, phrase found.
        ENGLISH_TARGET_PHRASE_CONFIDENCE (ClassVar[float]): English target, reverse phrase found.
        ENGLISH_TARGET_GLOSS_CONFIDENCE (ClassVar[float]): English target, romanized gloss only.
        LATIN_PHRASE_CONFIDENCE (ClassVar[float]): Latin to Latin, phrase found.
        BRIDGED_PHRASE_CONFIDENCE (ClassVar[float]): Latin/native to native, pivot phrase found.
        NATIVE_TO_LATIN_PHRASE_CONFIDENCE (ClassVar[float]): Native to Latin, pivot phrase found.
    """

    ENGLISH_SOURCE_PHRASE_CONFIDENCE: ClassVar[float] = 0.95
    ENGLISH_TARGET_PHRASE_CONFIDENCE: ClassVar[float] = 0.9
    ENGLISH_TARGET_GLOSS_CONFIDENCE: ClassVar[float] = 0.7
    LATIN_PHRASE_CONFIDENCE: ClassVar[float] = 0.9
    BRIDGED_PHRASE_CONFIDENCE: ClassVar[float] = 0.85
    NATIVE_TO_LATIN_PHRASE_CONFIDENCE: ClassVar[float] = 0.8

    def __init__(
        self,
        language_registry: LanguageRegistry,
        transliterator: Transliterator,
        dictionary: PhraseDictionary,
        cache: ResultCache,
    ) -> None:
        self._languages: LanguageRegistry = language_registry
        self._transliterator: Transliterator = transliterator
        self._dictionary: PhraseDictionary = dictionary
        self._cache: ResultCache = cache
        self._handlers: dict[TranslationDirection, Callable[[TranslationRequest], TranslationResult]] = {
            TranslationDirection.PASSTHROUGH: self._handle_passthrough,
            TranslationDirection.ENGLISH_SOURCE: self._handle_english_source,
            TranslationDirection.ENGLISH_TARGET: self._handle_english_target,
            TranslationDirection.LATIN_TO_LATIN: self._handle_latin_to_latin,
            TranslationDirection.LATIN_TO_NATIVE: self._handle_latin_to_native,
            TranslationDirection.NATIVE_TO_LATIN: self._handle_native_to_latin,
            TranslationDirection.NATIVE_TO_NATIVE: self._handle_native_to_native,
        }

    def resolve_direction(self, source_language: str | None, target_language: str | None) -> TranslationDirection:
        """Resolve the direction of a language pair from the registry properties."""
        source: str = self._languages.normalize(source_language)
        target: str = self._languages.normalize(target_language)
        return resolve_direction(
            source_is_latin=self._languages.is_latin_script(source),
            target_is_latin=self._languages.is_latin_script(target),
            source_is_english=self._languages.is_english(source),
            target_is_english=self._languages.is_english(target),
            same_language=self._languages.is_same_language(source, target),
        )

    async def translate(
        self, text: str, source_language: str | None, target_language: str | None
    ) -> TranslationResult:
        """Translate text from the source language to the target language.

        Never raises for malformed input or unknown languages. Suspends only while the phrase
        dictionary loads on first use.

        Args:
            text (str): Text to translate.
            source_language (str | None): Free-form source language.
            target_language (str | None): Free-form target language.

        Returns:
            TranslationResult: The translation; a zero-confidence passthrough for blank input.
        """
        trimmed: str = StringUtils.ensure_str(text).strip()
        source: str = self._languages.normalize(source_language)
        target: str = self._languages.normalize(target_language)

        if not trimmed:
            return TranslationResult(
                text="",
                original_text="",
                source_language=source,
                target_language=target,
                direction=TranslationDirection.PASSTHROUGH,
                confidence=0.0,
                method=TranslationMethod.PASSTHROUGH,
            )

        cache_key: str = self._cache.make_key(trimmed, source, target)
        cached: TranslationResult | None = self._cache.get(cache_key)
        if cached is not None:
            return cached

        await self._dictionary.ensure_loaded()

        direction: TranslationDirection = self.resolve_direction(source, target)
        request = TranslationRequest(
            trimmed,
            source,
            target,
            input_is_latin=ScriptClassifier.is_latin_text(trimmed),
            target_is_latin=self._languages.is_latin_script(target),
        )
        result: TranslationResult = self._handlers[direction](request)
        logger.debug(
            "translate [%s] %s -> %s method=%s confidence=%.2f",
            direction,
            source,
            target,
            result.method,
            result.confidence,
        )

        if result.is_translated or result.is_transliterated:
            self._cache.set(cache_key, result)
        return result

    async def english_preview(self, text: str, source_language: str | None) -> str:
        """Best-effort English meaning of a text, for previews while typing.

        Args:
            text (str): Text in the source language, native or romanized.
            source_language (str | None): Free-form source language.

        Returns:
            str: English phrase when known, else the romanized form, else the input.
        """
        if StringUtils.is_blank(text):
            return ""
        if self._languages.is_english(source_language):
            return text

        await self._dictionary.ensure_loaded()

        english: str | None = self._dictionary.lookup_reverse(text, source_language)
        if english:
            return english
        if ScriptClassifier.is_latin_text(text):
            return self._dictionary.lookup_english(text) or text
        return self._transliterator.to_latin(text, source_language)

    def derive_pivot(self, text: str, source_language: str, *, input_is_latin: bool) -> str:
        """Derive the English pivot of a source text.

        Latin input is taken as its own pivot. Native input is looked up in the dictionary and
        romanized when the dictionary has no entry.

        Args:
            text (str): Trimmed source text.
            source_language (str): Normalized source language key.
            input_is_latin (bool): Whether the text is primarily Latin script.

        Returns:
            str: The English pivot.
        """
        if input_is_latin:
            return text
        return self._dictionary.lookup_reverse(text, source_language) or self._transliterator.to_latin(
            text, source_language
        )

    def _handle_passthrough(self, request: TranslationRequest) -> TranslationResult:
        text: str = request.text
        if request.input_is_latin and not request.target_is_latin:
            text = self._transliterator.to_native(request.text, request.target)
        elif not request.input_is_latin and request.target_is_latin:
            text = self._transliterator.to_latin(request.text, request.source)

        return request.result(
            TranslationDirection.PASSTHROUGH,
            text,
            is_translated=False,
            is_transliterated=text != request.text,
            confidence=1.0,
            method=TranslationMethod.PASSTHROUGH,
        )

    def _handle_english_source(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.ENGLISH_SOURCE
        phrase: str | None = self._dictionary.lookup_forward(request.text, request.target)
        if phrase is not None:
            return request.result(
                direction,
                phrase,
                english_pivot=request.text,
                is_translated=True,
                confidence=self.ENGLISH_SOURCE_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE_LOOKUP,
            )

        words: WordByWordResult = self._dictionary.word_by_word(request.text, request.target)
        text: str = words.text
        if not request.target_is_latin and ScriptClassifier.is_latin_text(text):
            text = self._transliterator.to_native(text, request.target)

        return request.result(
            direction,
            text,
            english_pivot=request.text,
            is_translated=words.translated,
            is_transliterated=text != words.text,
            confidence=words.confidence,
            method=TranslationMethod.WORD_BY_WORD if words.translated else TranslationMethod.TRANSLITERATION,
        )

    def _handle_english_target(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.ENGLISH_TARGET
        english: str | None = self._dictionary.lookup_reverse(request.text, request.source)
        if english is not None:
            return request.result(
                direction,
                english,
                is_translated=True,
                confidence=self.ENGLISH_TARGET_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE_LOOKUP,
            )

        gloss: str = request.text
        if not request.input_is_latin:
            gloss = self._transliterator.to_latin(request.text, request.source)

        return request.result(
            direction,
            gloss,
            is_translated=True,
            is_transliterated=not request.input_is_latin,
            confidence=self.ENGLISH_TARGET_GLOSS_CONFIDENCE,
            method=TranslationMethod.DIRECT,
        )

    def _handle_latin_to_latin(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.LATIN_TO_LATIN
        phrase: str | None = self._dictionary.lookup_forward(request.text, request.target)
        if phrase is not None:
            return request.result(
                direction,
                phrase,
                is_translated=True,
                confidence=self.LATIN_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE_LOOKUP,
            )

        words: WordByWordResult = self._dictionary.word_by_word(request.text, request.target)
        return request.result(
            direction,
            words.text,
            is_translated=words.translated,
            confidence=words.confidence,
            method=TranslationMethod.WORD_BY_WORD if words.translated else TranslationMethod.DIRECT,
        )

    def _handle_latin_to_native(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.LATIN_TO_NATIVE
        pivot: str = request.text
        phrase: str | None = self._dictionary.lookup_forward(pivot, request.target)
        if phrase is not None:
            return request.result(
                direction,
                phrase,
                english_pivot=pivot,
                is_translated=True,
                confidence=self.BRIDGED_PHRASE_CONFIDENCE,
                method=TranslationMethod.ENGLISH_PIVOT,
            )

        words: WordByWordResult = self._dictionary.word_by_word(pivot, request.target)
        text: str = words.text
        if ScriptClassifier.is_latin_text(text):
            text = self._transliterator.to_native(text, request.target)

        return request.result(
            direction,
            text,
            english_pivot=pivot,
            is_translated=words.translated,
            is_transliterated=True,
            confidence=words.confidence,
            method=TranslationMethod.ENGLISH_PIVOT,
        )

    def _handle_native_to_latin(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.NATIVE_TO_LATIN
        pivot: str = self._dictionary.lookup_reverse(request.text, request.source) or self._transliterator.to_latin(
            request.text, request.source
        )
        phrase: str | None = self._dictionary.lookup_forward(pivot, request.target)
        if phrase is not None:
            return request.result(
                direction,
                phrase,
                english_pivot=pivot,
                is_translated=True,
                is_transliterated=True,
                confidence=self.NATIVE_TO_LATIN_PHRASE_CONFIDENCE,
                method=TranslationMethod.ENGLISH_PIVOT,
            )

        words: WordByWordResult = self._dictionary.word_by_word(pivot, request.target)
        return request.result(
            direction,
            words.text,
            english_pivot=pivot,
            is_translated=words.translated,
            is_transliterated=True,
            confidence=words.confidence,
            method=TranslationMethod.ENGLISH_PIVOT,
        )

    def _handle_native_to_native(self, request: TranslationRequest) -> TranslationResult:
        direction = TranslationDirection.NATIVE_TO_NATIVE
        pivot: str = self.derive_pivot(request.text, request.source, input_is_latin=request.input_is_latin)
        phrase: str | None = self._dictionary.lookup_forward(pivot, request.target)
        if phrase is not None:
            return request.result(
                direction,
                phrase,
                english_pivot=pivot,
                is_translated=True,
                is_transliterated=not request.input_is_latin,
                confidence=self.BRIDGED_PHRASE_CONFIDENCE,
                method=TranslationMethod.ENGLISH_PIVOT,
            )

        words: WordByWordResult = self._dictionary.word_by_word(pivot, request.target)
        text: str = words.text
        if ScriptClassifier.is_latin_text(text) and not request.target_is_latin:
            text = self._transliterator.to_native(text, request.target)

        return request.result(
            direction,
            text,
            english_pivot=pivot,
            is_translated=words.translated,
            is_transliterated=True,
            confidence=words.confidence,
            method=TranslationMethod.ENGLISH_PIVOT,
        )
