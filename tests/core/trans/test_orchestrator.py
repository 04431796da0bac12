from __future__ import annotations

import itertools

import pytest

from core.cache.manager import ResultCache
from core.language.registry import LanguageRegistry
from core.phrases.dictionary import PhraseDictionary
from core.phrases.interface import PhraseRow
from core.phrases.stores.memory_store import MemoryPhraseStore
from core.script.grammar import GrammarRegistry
from core.script.transliterator import Transliterator
from core.trans.orchestrator import TranslationOrchestrator
from models.translation_models import BRIDGED_DIRECTIONS, TranslationDirection, TranslationMethod, TranslationResult

ROWS: list[PhraseRow] = [
    {
        "english": "hello",
        "hindi": "नमस्ते",
        "telugu": "నమస్కారం",
        "tamil": "வணக்கம்",
        "spanish": "hola",
        "french": "bonjour",
    },
    {"english": "how are you", "telugu": "మీరు ఎలా ఉన్నారు", "tamil": "நீங்கள் எப்படி இருக்கிறீர்கள்"},
    {"english": "water", "hindi": "पानी", "tamil": "தண்ணீர்", "spanish": "agua", "french": "eau"},
    {"english": "friend", "hindi": "दोस्त", "spanish": "amigo"},
]


@pytest.fixture(scope="module")
def languages() -> LanguageRegistry:
    return LanguageRegistry.from_file()


@pytest.fixture
def orchestrator(languages: LanguageRegistry) -> TranslationOrchestrator:
    transliterator = Transliterator(languages, GrammarRegistry.with_builtin(languages))
    dictionary = PhraseDictionary(MemoryPhraseStore(ROWS), languages)
    return TranslationOrchestrator(languages, transliterator, dictionary, ResultCache())


async def test_blank_input(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("   ", "english", "hindi")

    assert result.text == ""
    assert result.direction == TranslationDirection.PASSTHROUGH
    assert result.confidence == 0.0
    assert result.is_translated is False


async def test_same_language_passthrough(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("hola", "spanish", "Español")

    assert result.text == "hola"
    assert result.direction == TranslationDirection.PASSTHROUGH
    assert result.is_translated is False
    assert result.is_transliterated is False
    assert result.confidence == 1.0


async def test_same_language_passthrough_converts_script(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("namaste", "hindi", "hindi")

    assert result.text == "नमस्ते"
    assert result.direction == TranslationDirection.PASSTHROUGH
    assert result.is_translated is False
    assert result.is_transliterated is True


async def test_english_source_phrase(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("Hello", "english", "hindi")

    assert result.text == "नमस्ते"
    assert result.direction == TranslationDirection.ENGLISH_SOURCE
    assert result.method == TranslationMethod.PHRASE_LOOKUP
    assert result.is_translated is True
    assert result.confidence == pytest.approx(0.95)
    assert result.original_text == "Hello"


async def test_english_source_word_by_word(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("friend water", "english", "hindi")

    assert result.text == "दोस्त पानी"
    assert result.method == TranslationMethod.WORD_BY_WORD
    assert result.confidence == pytest.approx(1.0)


async def test_english_source_partial_word_by_word(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("friend xyz", "english", "spanish")

    assert result.text == "amigo xyz"
    assert result.is_translated is True
    assert result.confidence == pytest.approx(0.5)


async def test_english_source_falls_back_to_script(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("namaste", "english", "hindi")

    assert result.text == "नमस्ते"
    assert result.is_translated is False
    assert result.is_transliterated is True
    assert result.method == TranslationMethod.TRANSLITERATION
    assert result.confidence == 0.0


async def test_english_target_reverse_phrase(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("नमस्ते", "hindi", "english")

    assert result.text == "hello"
    assert result.direction == TranslationDirection.ENGLISH_TARGET
    assert result.confidence == pytest.approx(0.9)
    assert result.method == TranslationMethod.PHRASE_LOOKUP


async def test_english_target_gloss(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("कमल", "hindi", "english")

    assert result.text == "kamala"
    assert result.is_translated is True
    assert result.is_transliterated is True
    assert result.confidence == pytest.approx(0.7)


async def test_english_target_latin_gloss(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("kuch bhi", "hindi", "english")

    assert result.text == "kuch bhi"
    assert result.is_transliterated is False
    assert result.confidence == pytest.approx(0.7)


async def test_latin_to_latin(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("water", "spanish", "french")

    assert result.text == "eau"
    assert result.direction == TranslationDirection.LATIN_TO_LATIN
    assert result.confidence == pytest.approx(0.9)


async def test_latin_to_latin_without_entry(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("buenas tardes", "spanish", "french")

    assert result.text == "buenas tardes"
    assert result.is_translated is False
    assert result.method == TranslationMethod.DIRECT


async def test_latin_to_native_phrase(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("water", "spanish", "hindi")

    assert result.text == "पानी"
    assert result.direction == TranslationDirection.LATIN_TO_NATIVE
    assert result.english_pivot == "water"
    assert result.method == TranslationMethod.ENGLISH_PIVOT
    assert result.confidence == pytest.approx(0.85)


async def test_latin_to_native_transliterates_unknown_text(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("namaste", "spanish", "hindi")

    assert result.text == "नमस्ते"
    assert result.is_translated is False
    assert result.is_transliterated is True
    assert result.english_pivot == "namaste"


async def test_native_to_latin(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("पानी", "hindi", "spanish")

    assert result.text == "agua"
    assert result.direction == TranslationDirection.NATIVE_TO_LATIN
    assert result.english_pivot == "water"
    assert result.confidence == pytest.approx(0.8)


async def test_native_to_native_with_latin_input(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("how are you", "telugu", "tamil")

    assert result.direction == TranslationDirection.NATIVE_TO_NATIVE
    assert result.english_pivot == "how are you"
    assert result.text == "நீங்கள் எப்படி இருக்கிறீர்கள்"
    assert result.is_translated is True
    assert result.confidence == pytest.approx(0.85)


async def test_native_to_native_with_native_input(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("మీరు ఎలా ఉన్నారు", "telugu", "tamil")

    assert result.text == "நீங்கள் எப்படி இருக்கிறீர்கள்"
    assert result.english_pivot == "how are you"
    assert result.is_transliterated is True


async def test_second_call_is_cached(orchestrator: TranslationOrchestrator) -> None:
    first: TranslationResult = await orchestrator.translate("hello", "english", "tamil")
    second: TranslationResult = await orchestrator.translate("  hello ", "english", "tamil")

    assert first.method == TranslationMethod.PHRASE_LOOKUP
    assert second.method == TranslationMethod.CACHED
    assert second.text == first.text


async def test_plain_passthrough_is_not_cached(orchestrator: TranslationOrchestrator) -> None:
    await orchestrator.translate("hola", "spanish", "spanish")
    second: TranslationResult = await orchestrator.translate("hola", "spanish", "spanish")

    assert second.method == TranslationMethod.PASSTHROUGH


async def test_unknown_languages_do_not_raise(orchestrator: TranslationOrchestrator) -> None:
    result: TranslationResult = await orchestrator.translate("hello", "klingon", "elvish")

    assert result.direction == TranslationDirection.LATIN_TO_LATIN
    assert result.text == "hello"


LANGUAGES: list[str] = ["english", "hindi", "telugu", "tamil", "spanish", "french", "russian", "klingon"]
TEXTS: list[str] = ["hello", "नमस्ते", "water xyz", "మీరు ఎలా ఉన్నారు"]


async def test_results_respect_invariants(orchestrator: TranslationOrchestrator, languages: LanguageRegistry) -> None:
    for text, source, target in itertools.product(TEXTS, LANGUAGES, LANGUAGES):
        result: TranslationResult = await orchestrator.translate(text, source, target)

        assert 0.0 <= result.confidence <= 1.0
        if languages.is_same_language(source, target):
            assert result.direction == TranslationDirection.PASSTHROUGH
            assert result.is_translated is False
        if result.direction in BRIDGED_DIRECTIONS and result.method != TranslationMethod.CACHED:
            assert result.english_pivot


async def test_english_preview(orchestrator: TranslationOrchestrator) -> None:
    assert await orchestrator.english_preview("", "hindi") == ""
    assert await orchestrator.english_preview("नमस्ते", "hindi") == "hello"
    assert await orchestrator.english_preview("कमल", "hindi") == "kamala"
    assert await orchestrator.english_preview("hola", "spanish") == "hello"
    assert await orchestrator.english_preview("anything", "english") == "anything"


async def test_resolve_direction_uses_registry(orchestrator: TranslationOrchestrator) -> None:
    assert orchestrator.resolve_direction("te", "ta") == TranslationDirection.NATIVE_TO_NATIVE
    assert orchestrator.resolve_direction("bangla", "bengali") == TranslationDirection.PASSTHROUGH
    assert orchestrator.resolve_direction("hindi", "en") == TranslationDirection.ENGLISH_TARGET
