"""Models for language metadata and phrase dictionary rows."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, LetterCase, Undefined, dataclass_json

__all__: list[str] = ["DictionaryEntry", "LanguageInfo", "ScriptDetection"]

# Row fields of the phrase store that are not language columns.
PHRASE_META_FIELDS: frozenset[str] = frozenset(
    {"id", "phrase_key", "english", "category", "usage_count", "created_at", "updated_at"}
)


def _normalize_key(value: str) -> str:
    return unicodedata.normalize("NFC", value or "").strip().lower()


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class LanguageInfo(DataClassJsonMixin):
    """Metadata of one language as supplied by the language metadata source.

    Attributes:
        code (str): ISO-like language code, lower case.
        name (str): Canonical English name, lower case.
        native_name (str): Name of the language in its own script.
        script (str): Script identifier such as 'Latin' or 'Devanagari'.
        rtl (bool): Whether the script is written right to left.
    """

    code: str
    name: str
    native_name: str = ""
    script: str = "Latin"
    rtl: bool = False

    def __post_init__(self) -> None:
        self.code = _normalize_key(self.code)
        self.name = _normalize_key(self.name)
        self.script = self.script or "Latin"

    @property
    def is_latin(self) -> bool:
        return self.script == "Latin"


@dataclass
class ScriptDetection:
    """Outcome of classifying the script of a piece of text.

    Attributes:
        script (str): Detected script identifier.
        language (str): Most probable language for that script.
        is_latin (bool): Whether the text was classified as Latin script.
        confidence (float): Share of letters belonging to the detected script.
    """

    script: str
    language: str
    is_latin: bool
    confidence: float


@dataclass
class DictionaryEntry:
    """One phrase of the phrase store with its per-language columns.

    Attributes:
        english_key (str): Lower-cased, trimmed English phrase, unique per entry.
        english (str): English phrase as stored.
        phrase_key (str | None): Optional explicit phrase identifier.
        category (str | None): Optional phrase category.
        translations (dict[str, str]): Language column -> non-blank text.
    """

    english_key: str
    english: str
    phrase_key: str | None = None
    category: str | None = None
    translations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> DictionaryEntry | None:
        """Build an entry from a phrase store row.

        Columns with blank or non-string values are skipped.

        Args:
            row (dict[str, Any]): Raw row as returned by the store.

        Returns:
            DictionaryEntry | None: The entry, or None if the row has no English text.
        """
        english: str = str(row.get("english") or "").strip()
        if not english:
            return None

        phrase_key: Any = row.get("phrase_key")
        category: Any = row.get("category")
        translations: dict[str, str] = {
            column: value
            for column, value in row.items()
            if column not in PHRASE_META_FIELDS and isinstance(value, str) and value.strip()
        }
        return cls(
            english_key=_normalize_key(english),
            english=english,
            phrase_key=phrase_key.strip() if isinstance(phrase_key, str) and phrase_key.strip() else None,
            category=category if isinstance(category, str) else None,
            translations=translations,
        )

    def column(self, column: str) -> str | None:
        """Return the text of a language column, 'english' included."""
        if column == "english":
            return self.english
        return self.translations.get(column)
