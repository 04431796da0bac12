"""Script grammar values and the registry that selects one per language.

A ScriptGrammar is pure data: the romanized-code -> glyph maps of one writing system. The
transliterator is written once against this shape, so supporting a new script means
registering a new value, not writing new conversion code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

    from core.language.registry import LanguageRegistry

__all__: list[str] = ["GrammarRegistry", "ScriptGrammar"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class ScriptGrammar:
    """Transliteration tables of one writing system.

    Attributes:
        name (str): Canonical script identifier, lower case (e.g. 'devanagari').
        consonants (Mapping[str, str]): Romanized consonant code -> consonant glyph.
        vowels (Mapping[str, str]): Romanized vowel code -> standalone vowel glyph.
        modifiers (Mapping[str, str]): Romanized vowel code -> dependent vowel sign.
        joiner (str | None): Vowel-suppressing mark (virama), None for alphabets.
        inherent_vowel (str | None): Romanized vowel carried by every bare consonant, None for alphabets.
        digits (Mapping[str, str]): Optional ASCII digit -> native digit map.
        MAX_KEY_LEN (ClassVar[int]): Longest romanized code accepted in any map.
        MAX_MODIFIER_LOOKAHEAD (ClassVar[int]): Characters examined after a consonant for a vowel sign.
    """

    MAX_KEY_LEN: ClassVar[int] = 4
    MAX_MODIFIER_LOOKAHEAD: ClassVar[int] = 2

    name: str
    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    modifiers: Mapping[str, str] = field(default_factory=dict)
    joiner: str | None = None
    inherent_vowel: str | None = "a"
    digits: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for table_name in ("consonants", "vowels", "modifiers", "digits"):
            table: Mapping[str, str] = getattr(self, table_name)
            for key in table:
                if not 0 < len(key) <= self.MAX_KEY_LEN:
                    msg: str = f"'{self.name}.{table_name}' has a key of invalid length: {key!r}"
                    raise ValueError(msg)
            # frozen dataclass: assign through object to store read-only copies
            object.__setattr__(self, table_name, MappingProxyType(dict(table)))
        object.__setattr__(self, "name", StringUtils.normalize_key(self.name))

    @staticmethod
    def _match(table: Mapping[str, str], text: str, pos: int, max_len: int) -> tuple[str, int] | None:
        for length in range(min(max_len, len(text) - pos), 0, -1):
            chunk: str = text[pos : pos + length]
            if chunk in table:
                return table[chunk], length
        return None

    def match_letter(self, text: str, pos: int) -> tuple[str, int, bool] | None:
        """Find the longest consonant or standalone vowel code starting at a position.

        Lengths are tried from MAX_KEY_LEN down to 1; at each length a consonant is preferred
        over a vowel.

        Args:
            text (str): Romanized text.
            pos (int): Start index.

        Returns:
            tuple[str, int, bool] | None: (glyph, consumed length, is_consonant), or None if no code matches.
        """
        for length in range(min(self.MAX_KEY_LEN, len(text) - pos), 0, -1):
            chunk: str = text[pos : pos + length]
            if chunk in self.consonants:
                return self.consonants[chunk], length, True
            if chunk in self.vowels:
                return self.vowels[chunk], length, False
        return None

    def starts_consonant(self, text: str, pos: int) -> bool:
        return self._match(self.consonants, text, pos, self.MAX_KEY_LEN) is not None

    def match_modifier(self, text: str, pos: int) -> tuple[str, int] | None:
        """Find a dependent vowel sign code right after a consonant, longest first."""
        return self._match(self.modifiers, text, pos, self.MAX_MODIFIER_LOOKAHEAD)

    @cached_property
    def signs(self) -> frozenset[str]:
        """Glyphs that are both a consonant code and a vowel sign (anusvara, visarga)."""
        return frozenset(self.consonants.values()) & frozenset(self.modifiers.values())

    @cached_property
    def reverse_consonants(self) -> dict[str, str]:
        return self._reverse(self.consonants)

    @cached_property
    def reverse_vowels(self) -> dict[str, str]:
        return self._reverse(self.vowels)

    @cached_property
    def reverse_modifiers(self) -> dict[str, str]:
        return self._reverse(self.modifiers)

    @cached_property
    def max_glyph_len(self) -> int:
        glyphs: list[str] = [*self.consonants.values(), *self.vowels.values(), *self.modifiers.values()]
        return max((len(glyph) for glyph in glyphs), default=1)

    @staticmethod
    def _reverse(table: Mapping[str, str]) -> dict[str, str]:
        reverse: dict[str, str] = {}
        for latin, native in table.items():
            reverse.setdefault(native, latin)
        return reverse


class GrammarRegistry:
    """Select the ScriptGrammar of a language.

    A language resolves to a script identifier through the explicit language map first and
    through the script recorded in the language metadata second.

    Args:
        language_registry (LanguageRegistry): Registry used to normalize language names.
        grammars (Iterable[ScriptGrammar]): Grammars to register initially.
        language_scripts (Mapping[str, str] | None): Language key -> script identifier.
    """

    def __init__(
        self,
        language_registry: LanguageRegistry,
        grammars: Iterable[ScriptGrammar] = (),
        language_scripts: Mapping[str, str] | None = None,
    ) -> None:
        self._languages: LanguageRegistry = language_registry
        self._grammars: dict[str, ScriptGrammar] = {}
        self._language_scripts: dict[str, str] = {}
        for grammar in grammars:
            self.register(grammar)
        for language, script in (language_scripts or {}).items():
            self._language_scripts[language_registry.normalize(language)] = StringUtils.normalize_key(script)

    @classmethod
    def with_builtin(cls, language_registry: LanguageRegistry) -> GrammarRegistry:
        """Create a registry holding the built-in grammars."""
        from core.script.tables import BUILTIN_GRAMMARS, LANGUAGE_SCRIPTS  # noqa: PLC0415

        return cls(language_registry, BUILTIN_GRAMMARS, LANGUAGE_SCRIPTS)

    def register(self, grammar: ScriptGrammar, languages: Iterable[str] = ()) -> None:
        """Register a grammar, replacing any grammar with the same name.

        Args:
            grammar (ScriptGrammar): Grammar to register.
            languages (Iterable[str]): Languages to bind to this grammar explicitly.
        """
        if grammar.name in self._grammars:
            logger.info("Replacing grammar '%s'", grammar.name)
        self._grammars[grammar.name] = grammar
        for language in languages:
            self._language_scripts[self._languages.normalize(language)] = grammar.name
        logger.debug("Registered grammar '%s'", grammar.name)

    def get(self, script: str) -> ScriptGrammar | None:
        return self._grammars.get(StringUtils.normalize_key(script))

    def for_language(self, language: str | None) -> ScriptGrammar | None:
        """Return the grammar of a language, or None when the language has no grammar.

        Args:
            language (str | None): Language name or key.

        Returns:
            ScriptGrammar | None: The grammar used to transliterate that language.
        """
        key: str = self._languages.normalize(language)
        script: str | None = self._language_scripts.get(key)
        if script is None:
            script = StringUtils.normalize_key(self._languages.get_script(key))
        return self._grammars.get(script)

    def has_grammar(self, language: str | None) -> bool:
        return self.for_language(language) is not None

    @property
    def scripts(self) -> list[str]:
        return list(self._grammars)
