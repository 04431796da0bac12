from __future__ import annotations

import pytest

from core.language.classifier import ScriptClassifier
from core.language.registry import LanguageRegistry
from core.script.grammar import GrammarRegistry, ScriptGrammar
from core.script.transliterator import Transliterator


@pytest.fixture(scope="module")
def languages() -> LanguageRegistry:
    return LanguageRegistry.from_file()


@pytest.fixture
def transliterator(languages: LanguageRegistry) -> Transliterator:
    return Transliterator(languages, GrammarRegistry.with_builtin(languages))


def test_namaste_to_devanagari(transliterator: Transliterator) -> None:
    result: str = transliterator.to_native("namaste", "hindi")

    assert result == "नमस्ते"
    assert result != "namaste"
    assert not any("a" <= char.lower() <= "z" for char in result)


def test_namaste_back_to_latin(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("नमस्ते", "hindi") == "namaste"


@pytest.mark.parametrize(
    ("text", "language", "expected"),
    [
        ("kamal", "hindi", "कमल्"),
        ("ghar", "marathi", "घर्"),
        ("vanakkam", "tamil", "வநக்கம்"),
        ("amma", "telugu", "అమ్మ"),
        ("privet", "russian", "привет"),
    ],
)
def test_to_native(transliterator: Transliterator, text: str, language: str, expected: str) -> None:
    assert transliterator.to_native(text, language) == expected


def test_to_native_keeps_separators(transliterator: Transliterator) -> None:
    assert transliterator.to_native("namaste, dost!", "hindi") == "नमस्ते, दोस्त्!"


@pytest.mark.parametrize("language", ["english", "spanish", "french", "klingon"])
def test_to_native_is_noop_for_latin_target(transliterator: Transliterator, language: str) -> None:
    assert transliterator.to_native("namaste", language) == "namaste"
    assert transliterator.to_native("नमस्ते", language) == "नमस्ते"


def test_to_native_is_noop_for_native_input(transliterator: Transliterator) -> None:
    assert transliterator.to_native("నమస్కారం", "hindi") == "నమస్కారం"


def test_to_native_is_noop_without_grammar(transliterator: Transliterator) -> None:
    assert transliterator.to_native("konnichiwa", "japanese") == "konnichiwa"


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_input_is_returned_unchanged(transliterator: Transliterator, text: str) -> None:
    assert transliterator.to_native(text, "hindi") == text
    assert transliterator.to_latin(text, "hindi") == text


def test_to_native_output_is_native_text(transliterator: Transliterator) -> None:
    assert ScriptClassifier.is_latin_text(transliterator.to_native("mera naam ravi hai", "hindi")) is False


def test_to_latin_is_noop_for_latin_input(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("namaste", "hindi") == "namaste"


def test_to_latin_keeps_first_registered_spelling(transliterator: Transliterator) -> None:
    # 'v' and 'w' share a glyph; the reverse keeps 'v'
    assert transliterator.to_latin(transliterator.to_native("wah", "hindi"), "hindi") == "vah"


def test_to_latin_without_inherent_vowel(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("привет", "russian") == "privet"


def test_to_latin_copies_unknown_glyphs(transliterator: Transliterator) -> None:
    assert transliterator.to_latin("नमस्ते 123", "hindi") == "namaste 123"


def test_digits_are_mapped(languages: LanguageRegistry) -> None:
    grammars = GrammarRegistry(languages)
    grammars.register(
        ScriptGrammar(
            name="devanagari",
            consonants={"k": "क"},
            vowels={"a": "अ"},
            joiner="्",
            digits={"1": "१", "2": "२"},
        )
    )
    transliterator = Transliterator(languages, grammars)

    assert transliterator.to_native("ka 12", "hindi") == "क १२"


def test_live_preview(transliterator: Transliterator) -> None:
    assert transliterator.live_preview("", "hindi") == ""
    assert transliterator.live_preview("   ", "hindi") == ""
    assert transliterator.live_preview("nam", "hindi") == "नम्"
    assert transliterator.live_preview("hello", "english") == "hello"


def test_has_transliteration(transliterator: Transliterator) -> None:
    assert transliterator.has_transliteration("bengali") is True
    assert transliterator.has_transliteration("english") is False
