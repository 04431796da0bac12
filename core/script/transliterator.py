"""Convert text between romanized (Latin) input and native scripts.

Conversion is table driven: one scanning algorithm per direction, parameterized by the
ScriptGrammar of the language. Both directions are total: anything that cannot be converted
is copied through unchanged.

Reverse conversion is lossy. Several romanized codes share a glyph ('v' and 'w' both give
'व'), so reversing keeps only the first registered spelling, and 'f' typed as फ़ may come
back as 'ph'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.language.classifier import ScriptClassifier
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.language.registry import LanguageRegistry
    from core.script.grammar import GrammarRegistry, ScriptGrammar

__all__: list[str] = ["Transliterator"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class Transliterator:
    """Script converter bound to a language registry and a grammar registry.

    Args:
        language_registry (LanguageRegistry): Used for language normalization and script lookups.
        grammars (GrammarRegistry): Source of per-script grammar tables.
    """

    def __init__(self, language_registry: LanguageRegistry, grammars: GrammarRegistry) -> None:
        self._languages: LanguageRegistry = language_registry
        self._grammars: GrammarRegistry = grammars

    def has_transliteration(self, language: str | None) -> bool:
        return self._grammars.has_grammar(language)

    def to_native(self, text: str, target_language: str | None) -> str:
        """Convert romanized text to the native script of the target language.

        The text is returned unchanged when it is blank, when the target language is written
        in Latin script or has no grammar, or when the text is not primarily Latin.

        Args:
            text (str): Romanized input, e.g. 'namaste'.
            target_language (str | None): Language whose script to produce.

        Returns:
            str: Native-script text, e.g. 'नमस्ते'.
        """
        if StringUtils.is_blank(text):
            return text
        if self._languages.is_latin_script(target_language):
            return text
        if not ScriptClassifier.is_latin_text(text):
            return text
        grammar: ScriptGrammar | None = self._grammars.for_language(target_language)
        if grammar is None:
            return text

        result: str = self._scan_to_native(text, grammar)
        logger.debug("to_native [%s] '%s' -> '%s'", grammar.name, text, result)
        return result or text

    def to_latin(self, text: str, source_language: str | None) -> str:
        """Convert native-script text of the source language back to romanized form.

        Joiner marks produce no output. A bare consonant of a script with an inherent vowel
        gets that vowel back unless a vowel sign or a joiner follows it.

        Args:
            text (str): Native-script text.
            source_language (str | None): Language the text is written in.

        Returns:
            str: Romanized text; the input unchanged when it is already Latin or the language has no grammar.
        """
        if StringUtils.is_blank(text):
            return text
        if ScriptClassifier.is_latin_text(text):
            return text
        grammar: ScriptGrammar | None = self._grammars.for_language(source_language)
        if grammar is None:
            return text

        result: str = self._scan_to_latin(text, grammar)
        logger.debug("to_latin [%s] '%s' -> '%s'", grammar.name, text, result)
        return result or text

    def live_preview(self, text: str, target_language: str | None) -> str:
        """Preview of what the typed text looks like in the target script.

        Args:
            text (str): Text being typed.
            target_language (str | None): Language whose script to preview.

        Returns:
            str: Empty string for blank input, otherwise the converted (or unchanged) text.
        """
        if StringUtils.is_blank(text):
            return ""
        return self.to_native(text, target_language)

    @staticmethod
    def _scan_to_native(text: str, grammar: ScriptGrammar) -> str:
        output: list[str] = []
        i: int = 0
        length: int = len(text)
        while i < length:
            char: str = text[i]
            if StringUtils.is_non_letter(char):
                output.append(grammar.digits.get(char, char))
                i += 1
                continue

            matched: tuple[str, int, bool] | None = grammar.match_letter(text, i)
            if matched is None:
                output.append(char)
                i += 1
                continue

            glyph, consumed, is_consonant = matched
            output.append(glyph)
            i += consumed
            if not is_consonant or glyph in grammar.signs:
                continue

            modifier: tuple[str, int] | None = grammar.match_modifier(text, i)
            if modifier is not None:
                output.append(modifier[0])
                i += modifier[1]
            elif grammar.inherent_vowel and text.startswith(grammar.inherent_vowel, i):
                i += len(grammar.inherent_vowel)
            elif grammar.joiner and (
                i >= length or StringUtils.is_non_letter(text[i]) or grammar.starts_consonant(text, i)
            ):
                output.append(grammar.joiner)
        return "".join(output)

    @staticmethod
    def _scan_to_latin(text: str, grammar: ScriptGrammar) -> str:
        output: list[str] = []
        i: int = 0
        length: int = len(text)
        while i < length:
            if grammar.joiner and text.startswith(grammar.joiner, i):
                i += len(grammar.joiner)
                continue

            for size in range(min(grammar.max_glyph_len, length - i), 0, -1):
                chunk: str = text[i : i + size]
                if chunk in grammar.reverse_consonants:
                    output.append(grammar.reverse_consonants[chunk])
                    i += size
                    if grammar.joiner and grammar.inherent_vowel and chunk not in grammar.signs:
                        if not Transliterator._vowel_sign_follows(text, i, grammar):
                            output.append(grammar.inherent_vowel)
                    break
                if chunk in grammar.reverse_vowels:
                    output.append(grammar.reverse_vowels[chunk])
                    i += size
                    break
                if chunk in grammar.reverse_modifiers:
                    output.append(grammar.reverse_modifiers[chunk])
                    i += size
                    break
            else:
                output.append(text[i])
                i += 1
        return "".join(output)

    @staticmethod
    def _vowel_sign_follows(text: str, pos: int, grammar: ScriptGrammar) -> bool:
        if pos >= len(text):
            return False
        if grammar.joiner and text.startswith(grammar.joiner, pos):
            return True
        for size in range(min(grammar.max_glyph_len, len(text) - pos), 0, -1):
            chunk: str = text[pos : pos + size]
            if chunk in grammar.reverse_modifiers and chunk not in grammar.signs:
                return True
        return False
