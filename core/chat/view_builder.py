"""Dual-sided rendering of chat messages.

A message typed by the sender is rendered three ways: for the sender in their own script, as
a shared English core, and for the receiver in the receiver's language.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from core.language.classifier import ScriptClassifier
from models.translation_models import ChatMessageView, LanguageProfile, ScriptType, TranslationDirection
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.language.registry import LanguageRegistry
    from core.phrases.dictionary import PhraseDictionary
    from core.script.transliterator import Transliterator
    from core.trans.orchestrator import TranslationOrchestrator
    from models.translation_models import TranslationResult

__all__: list[str] = ["ChatViewBuilder"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ChatViewBuilder:
    """Build ChatMessageView values for a sender/receiver pair.

    Args:
        language_registry (LanguageRegistry): Language normalization and script properties.
        transliterator (Transliterator): Script converter for the sender view.
        dictionary (PhraseDictionary): Reverse lookups for the English core.
        orchestrator (TranslationOrchestrator): Translates the English core for the receiver.

    Attributes:
        SAME_LANGUAGE_CONFIDENCE (ClassVar[float]): Confidence of an untranslated same-language view.
        SCRIPT_ONLY_CONFIDENCE (ClassVar[float]): Confidence when only script conversion happened.
    """

    SAME_LANGUAGE_CONFIDENCE: ClassVar[float] = 1.0
    SCRIPT_ONLY_CONFIDENCE: ClassVar[float] = 0.9

    def __init__(
        self,
        language_registry: LanguageRegistry,
        transliterator: Transliterator,
        dictionary: PhraseDictionary,
        orchestrator: TranslationOrchestrator,
    ) -> None:
        self._languages: LanguageRegistry = language_registry
        self._transliterator: Transliterator = transliterator
        self._dictionary: PhraseDictionary = dictionary
        self._orchestrator: TranslationOrchestrator = orchestrator

    async def build(self, text: str, sender: LanguageProfile, receiver: LanguageProfile) -> ChatMessageView:
        """Render one outgoing message for both participants.

        Args:
            text (str): Raw message as typed by the sender.
            sender (LanguageProfile): Sender language profile.
            receiver (LanguageProfile): Receiver language profile.

        Returns:
            ChatMessageView: Sender view, receiver view, English core and flags.
        """
        trimmed: str = StringUtils.ensure_str(text).strip()
        sender_lang: str = self._languages.normalize(sender.mother_tongue)
        receiver_lang: str = self._languages.normalize(receiver.mother_tongue)
        direction: TranslationDirection = self._orchestrator.resolve_direction(sender_lang, receiver_lang)

        if not trimmed:
            return ChatMessageView(
                original_text="",
                sender_view="",
                receiver_view="",
                english_core="",
                sender_language=sender_lang,
                receiver_language=receiver_lang,
                direction=TranslationDirection.PASSTHROUGH,
                confidence=0.0,
            )

        await self._dictionary.ensure_loaded()

        input_is_latin: bool = ScriptClassifier.is_latin_text(trimmed)
        sender_is_english: bool = self._languages.is_english(sender_lang)

        sender_view: str = trimmed
        if input_is_latin and not self._languages.is_latin_script(sender_lang):
            sender_view = self._transliterator.to_native(trimmed, sender_lang)
        was_transliterated: bool = sender_view != trimmed

        english_core: str = trimmed
        phrase_hit: bool = False
        if not sender_is_english and not input_is_latin:
            english: str | None = self._dictionary.lookup_reverse(trimmed, sender_lang)
            phrase_hit = english is not None
            english_core = english or self._transliterator.to_latin(trimmed, sender_lang)

        receiver_view: str
        was_translated: bool = False
        translation: TranslationResult | None = None
        if self._languages.is_same_language(sender_lang, receiver_lang):
            receiver_view = sender_view
        elif self._languages.is_english(receiver_lang):
            receiver_view = english_core
            was_translated = not sender_is_english
        else:
            translation = await self._orchestrator.translate(english_core, "english", receiver_lang)
            receiver_view = translation.text
            was_translated = translation.is_translated

        confidence: float
        if translation is not None:
            confidence = translation.confidence
        elif was_translated:
            confidence = (
                self._orchestrator.ENGLISH_TARGET_PHRASE_CONFIDENCE
                if phrase_hit
                else self._orchestrator.ENGLISH_TARGET_GLOSS_CONFIDENCE
            )
        elif was_transliterated:
            confidence = self.SCRIPT_ONLY_CONFIDENCE
        else:
            confidence = self.SAME_LANGUAGE_CONFIDENCE

        logger.debug("chat view %s -> %s [%s] confidence=%.2f", sender_lang, receiver_lang, direction, confidence)
        return ChatMessageView(
            original_text=trimmed,
            sender_view=sender_view,
            receiver_view=receiver_view,
            english_core=english_core,
            sender_language=sender_lang,
            receiver_language=receiver_lang,
            direction=direction,
            was_translated=was_translated,
            was_transliterated=was_transliterated,
            confidence=confidence,
        )

    async def build_simple(
        self, text: str, sender_language: str | None, receiver_language: str | None
    ) -> ChatMessageView:
        """Render a message between two languages without explicit profiles.

        Each side reads the script its language is written in.

        Args:
            text (str): Raw message.
            sender_language (str | None): Sender language.
            receiver_language (str | None): Receiver language.

        Returns:
            ChatMessageView: As returned by build().
        """
        return await self.build(
            text,
            self.profile_for(sender_language, user_id="sender"),
            self.profile_for(receiver_language, user_id="receiver"),
        )

    def profile_for(self, language: str | None, *, user_id: str = "") -> LanguageProfile:
        script_type: ScriptType = ScriptType.LATIN if self._languages.is_latin_script(language) else ScriptType.NATIVE
        return LanguageProfile(mother_tongue=self._languages.normalize(language), script_type=script_type, user_id=user_id)

