from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from core.language.registry import LanguageRegistry, LanguageRegistryError
from models.language_models import LanguageInfo

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(scope="module")
def registry() -> LanguageRegistry:
    return LanguageRegistry.from_file(aliases={"desi": "Hindi"})


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("Hindi", "hindi"),
        ("  TELUGU  ", "telugu"),
        ("", "english"),
        (None, "english"),
        ("bangla", "bengali"),
        ("oriya", "odia"),
        ("farsi", "persian"),
        ("panjabi", "punjabi"),
        ("hi", "hindi"),
        ("te", "telugu"),
        ("हिन्दी", "hindi"),
        ("Español", "spanish"),
        ("chinese", "chinese (mandarin)"),
        ("desi", "hindi"),
        ("Klingon", "klingon"),
    ],
)
def test_normalize(registry: LanguageRegistry, given: str | None, expected: str) -> None:
    assert registry.normalize(given) == expected


def test_script_predicates(registry: LanguageRegistry) -> None:
    assert registry.is_latin_script("english") is True
    assert registry.is_latin_script("spanish") is True
    assert registry.is_latin_script("hindi") is False
    assert registry.is_latin_script("russian") is False
    assert registry.is_english("EN") is True
    assert registry.is_english("english") is True
    assert registry.is_english("spanish") is False
    assert registry.is_rtl("urdu") is True
    assert registry.is_rtl("arabic") is True
    assert registry.is_rtl("hindi") is False


def test_unknown_language_is_treated_as_latin(registry: LanguageRegistry) -> None:
    assert registry.is_latin_script("klingon") is True
    assert registry.is_rtl("klingon") is False
    assert registry.is_supported("klingon") is False
    assert registry.get_script("klingon") == "Latin"


def test_same_language_compares_normalized_keys(registry: LanguageRegistry) -> None:
    assert registry.is_same_language("Bangla", "bengali") is True
    assert registry.is_same_language("hi", "Hindi") is True
    assert registry.is_same_language("hindi", "marathi") is False


def test_language_metadata(registry: LanguageRegistry) -> None:
    info: LanguageInfo | None = registry.get_language_info("te")

    assert info is not None
    assert info.name == "telugu"
    assert registry.get_script("telugu") == "Telugu"
    assert registry.get_native_name("tamil") == "தமிழ்"
    assert registry.get_language_code("hindi") == "hi"
    assert registry.is_supported("hindi") is True
    assert len(registry) == len(registry.all_languages())


def test_dialect_borrows_script_column(registry: LanguageRegistry) -> None:
    assert registry.get_effective_language("bhojpuri") == "hindi"
    assert registry.get_effective_language("assamese") == "bengali"
    assert registry.get_effective_language("hindi") == "hindi"
    # Latin-script languages keep their own column
    assert registry.get_effective_language("german") == "german"


def test_language_column_names(registry: LanguageRegistry) -> None:
    assert registry.get_language_column("mandarin") == "chinese"
    assert registry.get_language_column("bhojpuri") == "hindi"
    assert registry.get_language_column("") == "english"
    assert registry.get_language_column("french") == "french"


@pytest.mark.parametrize("language", ["german", "klingon", "swahili"])
def test_languages_without_column_read_english(registry: LanguageRegistry, language: str) -> None:
    assert registry.get_language_column(language) == "english"


def test_registry_from_records() -> None:
    registry = LanguageRegistry(
        [
            LanguageInfo(code="xx", name="Examplish", native_name="Eksampl", script="Latin"),
            LanguageInfo(code="yy", name="examplish", script="Devanagari"),
        ]
    )

    assert len(registry) == 1
    assert registry.normalize("xx") == "examplish"
    assert registry.normalize("eksampl") == "examplish"


def test_from_file_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LanguageRegistryError, match="failed to load"):
        LanguageRegistry.from_file(tmp_path / "missing.json")


def test_from_file_rejects_invalid_json(tmp_path: Path) -> None:
    path: Path = tmp_path / "languages.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(LanguageRegistryError, match="invalid JSON"):
        LanguageRegistry.from_file(path)


def test_from_file_reads_custom_list(tmp_path: Path) -> None:
    path: Path = tmp_path / "languages.json"
    path.write_text(
        json.dumps([{"code": "hi", "name": "hindi", "nativeName": "हिन्दी", "script": "Devanagari", "rtl": False}]),
        encoding="utf-8",
    )

    registry: LanguageRegistry = LanguageRegistry.from_file(path)

    assert registry.all_languages()[0].name == "hindi"
    assert registry.is_latin_script("hindi") is False
