"""Models for translation requests and results.

Defines the translation direction and method enumerations, the TranslationResult value
returned by every translate call, user language profiles and the dual-sided chat view.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin, LetterCase, config, dataclass_json

__all__: list[str] = [
    "BRIDGED_DIRECTIONS",
    "ChatMessageView",
    "LanguageProfile",
    "ScriptType",
    "TranslationDirection",
    "TranslationMethod",
    "TranslationResult",
    "WordByWordResult",
]


class TranslationDirection(StrEnum):
    """How the source and target languages relate to each other."""

    PASSTHROUGH = "passthrough"
    ENGLISH_SOURCE = "english-source"
    ENGLISH_TARGET = "english-target"
    LATIN_TO_LATIN = "latin-to-latin"
    LATIN_TO_NATIVE = "latin-to-native"
    NATIVE_TO_LATIN = "native-to-latin"
    NATIVE_TO_NATIVE = "native-to-native"


# Directions that are bridged through an English pivot.
BRIDGED_DIRECTIONS: frozenset[TranslationDirection] = frozenset(
    {
        TranslationDirection.LATIN_TO_NATIVE,
        TranslationDirection.NATIVE_TO_LATIN,
        TranslationDirection.NATIVE_TO_NATIVE,
    }
)


class TranslationMethod(StrEnum):
    """Which resolution step produced a result."""

    PHRASE_LOOKUP = "phrase-lookup"
    WORD_BY_WORD = "word-by-word"
    ENGLISH_PIVOT = "english-pivot"
    TRANSLITERATION = "transliteration"
    PASSTHROUGH = "passthrough"
    CACHED = "cached"
    DIRECT = "direct"


class ScriptType(StrEnum):
    LATIN = "latin"
    NATIVE = "native"


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class TranslationResult(DataClassJsonMixin):
    """Outcome of a single translate call.

    Attributes:
        text (str): Text to display to the reader.
        original_text (str): Trimmed input text.
        source_language (str): Normalized source language key.
        target_language (str): Normalized target language key.
        direction (TranslationDirection): Resolved translation direction.
        english_pivot (str | None): English bridge text, when one was derived.
        is_translated (bool): Whether any lexical translation happened.
        is_transliterated (bool): Whether any script conversion happened.
        confidence (float): Reliability estimate in [0, 1].
        method (TranslationMethod): Resolution step that produced the text.
    """

    text: str
    original_text: str
    source_language: str
    target_language: str
    direction: TranslationDirection = TranslationDirection.PASSTHROUGH
    english_pivot: str | None = field(default=None, metadata=config(exclude=lambda value: value is None))
    is_translated: bool = False
    is_transliterated: bool = False
    confidence: float = 0.0
    method: TranslationMethod = TranslationMethod.PASSTHROUGH

    def __post_init__(self) -> None:
        self.confidence = _clamp(self.confidence)

    def tagged(self, method: TranslationMethod) -> TranslationResult:
        """Return a copy of this result carrying a different method tag."""
        return replace(self, method=method)


@dataclass
class WordByWordResult:
    """Result of translating a text one whitespace-separated token at a time.

    Attributes:
        text (str): Reassembled text, separators preserved.
        translated (bool): Whether at least one token was found in the dictionary.
        confidence (float): Translated tokens / total tokens, 0 when there are no tokens.
    """

    text: str
    translated: bool = False
    confidence: float = 0.0


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class LanguageProfile(DataClassJsonMixin):
    """Language settings of one chat participant.

    Attributes:
        mother_tongue (str): Free-form language name or code.
        script_type (ScriptType): Script the participant reads.
        user_id (str): Optional participant identifier.
    """

    mother_tongue: str
    script_type: ScriptType = ScriptType.LATIN
    user_id: str = ""


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class ChatMessageView(DataClassJsonMixin):
    """Dual-sided rendering of one outgoing chat message.

    Attributes:
        original_text (str): Trimmed raw input.
        sender_view (str): Text as shown to the sender, in the sender's script.
        receiver_view (str): Text as shown to the receiver, in the receiver's language.
        english_core (str): Shared English gloss.
        sender_language (str): Normalized sender language key.
        receiver_language (str): Normalized receiver language key.
        direction (TranslationDirection): Direction resolved for the sender/receiver pair.
        was_translated (bool): Whether the receiver view involved lexical translation.
        was_transliterated (bool): Whether the sender view involved script conversion.
        confidence (float): Reliability estimate in [0, 1].
    """

    original_text: str
    sender_view: str
    receiver_view: str
    english_core: str
    sender_language: str
    receiver_language: str
    direction: TranslationDirection = TranslationDirection.PASSTHROUGH
    was_translated: bool = False
    was_transliterated: bool = False
    confidence: float = 0.0
