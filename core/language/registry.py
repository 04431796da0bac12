"""Language name normalization and per-language script properties.

The registry is built from a language metadata source (a JSON list of language records)
and answers every "what kind of language is this" question the engine asks: canonical key,
script, direction, English-ness, and which phrase store column holds the language.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Final

from models.language_models import LanguageInfo
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

__all__: list[str] = ["DEFAULT_LANGUAGES_PATH", "LanguageRegistry", "LanguageRegistryError"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DEFAULT_LANGUAGES_PATH: Final[Path] = Path(__file__).resolve().parent.parent / "data" / "languages.json"


class LanguageRegistryError(Exception):
    """The language metadata source could not be read."""


class LanguageRegistry:
    """Resolve free-form language names to canonical keys and describe them.

    Args:
        languages (Iterable[LanguageInfo]): Language metadata records.
        aliases (Mapping[str, str] | None): Extra alias -> language name mappings,
            applied on top of the built-in aliases.

    Attributes:
        DEFAULT_LANGUAGE (ClassVar[str]): Key returned for empty input.
        LANGUAGE_ALIASES (ClassVar[dict[str, str]]): Built-in alternative names.
        SCRIPT_FALLBACK (ClassVar[dict[str, str]]): Phrase-supported language used for a dialect
            of a non-Latin script.
        SUPPORTED_PHRASE_LANGUAGES (ClassVar[frozenset[str]]): Languages that own a phrase store column.
        LANGUAGE_TO_COLUMN (ClassVar[dict[str, str]]): Column names that differ from the language key.
    """

    DEFAULT_LANGUAGE: ClassVar[str] = "english"

    LANGUAGE_ALIASES: ClassVar[dict[str, str]] = {
        "bangla": "bengali",
        "oriya": "odia",
        "farsi": "persian",
        "mandarin": "chinese (mandarin)",
        "chinese": "chinese (mandarin)",
        "hindustani": "hindi",
        "filipino": "tagalog",
        "panjabi": "punjabi",
        "sinhalese": "sinhala",
        "myanmar": "burmese",
        "hangul": "korean",
        "nihongo": "japanese",
    }

    SCRIPT_FALLBACK: ClassVar[dict[str, str]] = {
        "Devanagari": "hindi",
        "Bengali": "bengali",
        "Tamil": "tamil",
        "Telugu": "telugu",
        "Kannada": "kannada",
        "Malayalam": "malayalam",
        "Gujarati": "gujarati",
        "Gurmukhi": "punjabi",
        "Odia": "odia",
        "Arabic": "arabic",
        "Cyrillic": "russian",
        "Han": "chinese (mandarin)",
        "Japanese": "japanese",
        "Hangul": "korean",
        "Thai": "thai",
    }

    SUPPORTED_PHRASE_LANGUAGES: ClassVar[frozenset[str]] = frozenset(
        {
            "hindi", "bengali", "telugu", "tamil", "kannada", "malayalam",
            "marathi", "gujarati", "punjabi", "odia", "urdu", "arabic",
            "spanish", "french", "portuguese", "russian", "japanese", "korean",
            "chinese (mandarin)", "thai", "vietnamese", "indonesian", "turkish",
            "persian", "english",
        }
    )  # fmt: skip

    LANGUAGE_TO_COLUMN: ClassVar[dict[str, str]] = {"chinese (mandarin)": "chinese"}

    def __init__(self, languages: Iterable[LanguageInfo], aliases: Mapping[str, str] | None = None) -> None:
        self._by_name: dict[str, LanguageInfo] = {}
        self._by_code: dict[str, LanguageInfo] = {}
        self._aliases: dict[str, str] = dict(self.LANGUAGE_ALIASES)

        for info in languages:
            if not info.name or info.name in self._by_name:
                continue
            self._by_name[info.name] = info
            if info.code:
                self._by_code.setdefault(info.code, info)
            native: str = StringUtils.normalize_key(info.native_name)
            if native and native != info.name:
                self._aliases.setdefault(native, info.name)

        for alias, target in (aliases or {}).items():
            self._aliases[StringUtils.normalize_key(alias)] = StringUtils.normalize_key(target)

        logger.debug("LanguageRegistry created with %d languages and %d aliases", len(self._by_name), len(self._aliases))

    @classmethod
    def from_file(cls, path: Path | None = None, aliases: Mapping[str, str] | None = None) -> LanguageRegistry:
        """Build a registry from a JSON language metadata file.

        Args:
            path (Path | None): Metadata file; the packaged list when None.
            aliases (Mapping[str, str] | None): Extra aliases.

        Returns:
            LanguageRegistry: The populated registry.

        Raises:
            LanguageRegistryError: If the file cannot be read or is not a list of language records.
        """
        source: Path = path or DEFAULT_LANGUAGES_PATH
        logger.info("file open '%s' as read-only", source)
        msg: str
        try:
            with source.open(mode="r", encoding="utf-8") as fhdl:
                records = json.load(fhdl)
            languages: list[LanguageInfo] = [LanguageInfo.from_dict(record) for record in records]
        except OSError as err:
            logger.debug(err)
            msg = f"failed to load '{source}'"
            raise LanguageRegistryError(msg) from err
        except JSONDecodeError as err:
            logger.debug(err)
            msg = f"'{source}' is an invalid JSON format"
            raise LanguageRegistryError(msg) from err
        except (KeyError, TypeError, AttributeError) as err:
            logger.debug(err)
            msg = f"'{source}' does not contain valid language records"
            raise LanguageRegistryError(msg) from err
        else:
            logger.info("loaded %d languages from '%s'", len(languages), source)
            return cls(languages, aliases)

    def normalize(self, language: str | None) -> str:
        """Resolve a free-form language name, code or native name to a canonical key.

        Total: never fails. Unknown input comes back lower-cased and trimmed.

        Args:
            language (str | None): Language name, alias, ISO code or native name.

        Returns:
            str: Canonical language key; 'english' for empty input.
        """
        key: str = StringUtils.normalize_key(language)
        if not key:
            return self.DEFAULT_LANGUAGE
        if key in self._aliases:
            return self._aliases[key]
        if key in self._by_name:
            return key
        if key in self._by_code:
            return self._by_code[key].name
        return key

    def get_language_info(self, language: str | None) -> LanguageInfo | None:
        key: str = self.normalize(language)
        return self._by_name.get(key) or self._by_code.get(StringUtils.normalize_key(language))

    def get_script(self, language: str | None) -> str:
        """Return the script identifier of a language, 'Latin' for unknown languages."""
        info: LanguageInfo | None = self.get_language_info(language)
        return info.script if info else "Latin"

    def get_native_name(self, language: str | None) -> str:
        info: LanguageInfo | None = self.get_language_info(language)
        return info.native_name if info else self.normalize(language)

    def get_language_code(self, language: str | None) -> str:
        info: LanguageInfo | None = self.get_language_info(language)
        return info.code if info else self.normalize(language)[:2]

    def is_supported(self, language: str | None) -> bool:
        return self.get_language_info(language) is not None

    def is_latin_script(self, language: str | None) -> bool:
        """Check whether a language is written in Latin script.

        Unknown languages are treated as Latin, so script conversion is skipped for them.

        Args:
            language (str | None): Language name or key.

        Returns:
            bool: True if the language uses Latin script or is unknown.
        """
        info: LanguageInfo | None = self.get_language_info(language)
        return info.is_latin if info else True

    def is_english(self, language: str | None) -> bool:
        return self.normalize(language) == "english" or StringUtils.normalize_key(language) == "en"

    def is_rtl(self, language: str | None) -> bool:
        info: LanguageInfo | None = self.get_language_info(language)
        return info.rtl if info else False

    def is_same_language(self, language_a: str | None, language_b: str | None) -> bool:
        return self.normalize(language_a) == self.normalize(language_b)

    def get_effective_language(self, language: str | None) -> str:
        """Return the phrase-supported language used for a language.

        A dialect without its own phrase column borrows the column of the main language
        of its script. Latin-script languages never borrow: their own key is returned.

        Args:
            language (str | None): Language name or key.

        Returns:
            str: Canonical key of the language whose phrase column is used.
        """
        key: str = self.normalize(language)
        if key in self.SUPPORTED_PHRASE_LANGUAGES:
            return key
        info: LanguageInfo | None = self.get_language_info(key)
        if info is not None and info.script in self.SCRIPT_FALLBACK:
            return self.SCRIPT_FALLBACK[info.script]
        return key

    def get_language_column(self, language: str | None) -> str:
        """Return the phrase store column holding a language.

        Languages without a column of their own read the English column.
        """
        effective: str = self.get_effective_language(language)
        if effective not in self.SUPPORTED_PHRASE_LANGUAGES:
            return self.DEFAULT_LANGUAGE
        return self.LANGUAGE_TO_COLUMN.get(effective, effective)

    def all_languages(self) -> list[LanguageInfo]:
        return list(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
