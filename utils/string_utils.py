from __future__ import annotations

import hashlib
import unicodedata

from models.re_models import WHITESPACE_RUN_PATTERN

__all__: list[str] = ["StringUtils"]

# Unicode general-category prefixes that are copied through the transliterator unchanged.
_NON_LETTER_CATEGORIES: tuple[str, ...] = ("Z", "N", "P", "S", "C")


class StringUtils:
    """Utility class for the string handling shared by the engine components.

    Provides static helpers for type coercion, whitespace handling, key normalization,
    character classification and cache-key hashing.
    """

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Ensure that the value is a string, returning an empty string if None.

        Note: Does not strip, so separators the caller relies on survive.

        Args:
            value (str | None): The value to coerce.

        Returns:
            str: The value as a string, or empty string if None.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def compress_blanks(value: str) -> str:
        """Collapse runs of whitespace into a single space and trim both ends.

        Args:
            value (str): The string to compress.

        Returns:
            str: The compressed string.
        """
        value = StringUtils.ensure_str(value)
        return " ".join(value.split())

    @staticmethod
    def normalize_key(value: str | None) -> str:
        """Lower-case, trim and NFC-normalize a lookup key.

        Args:
            value (str | None): Raw key.

        Returns:
            str: Key suitable for dictionary lookups.
        """
        return StringUtils.normalize_text(StringUtils.ensure_str(value)).strip().lower()

    @staticmethod
    def split_preserving_whitespace(value: str) -> list[str]:
        """Split text into word and whitespace segments, keeping the separators.

        Joining the returned segments reproduces the input exactly.

        Args:
            value (str): Text to split.

        Returns:
            list[str]: Alternating word and whitespace segments, empty segments removed.
        """
        return [segment for segment in WHITESPACE_RUN_PATTERN.split(StringUtils.ensure_str(value)) if segment]

    @staticmethod
    def is_blank(value: str | None) -> bool:
        return not StringUtils.ensure_str(value).strip()

    @staticmethod
    def is_non_letter(char: str) -> bool:
        """Check whether a character is whitespace, a digit, punctuation, a symbol or a control.

        Args:
            char (str): Single character.

        Returns:
            bool: True if the character is not a letter or a combining mark.
        """
        return unicodedata.category(char).startswith(_NON_LETTER_CATEGORIES)

    @staticmethod
    def letters_only(value: str) -> str:
        """Drop whitespace, digits, punctuation and symbols, keeping letters and marks."""
        return "".join(char for char in StringUtils.ensure_str(value) if not StringUtils.is_non_letter(char))

    @staticmethod
    def generate_hash_key(normalized_source: str, source_lang: str, target_lang: str) -> str:
        """Generate a SHA-256 cache key for a translation request.

        Args:
            normalized_source (str): NFC-normalized source text.
            source_lang (str): Normalized source language key.
            target_lang (str): Normalized target language key.

        Returns:
            str: Hex digest identifying the request.
        """
        key_data: str = f"{normalized_source}|{source_lang}|{target_lang}"
        return hashlib.sha256(key_data.encode("utf-8")).hexdigest()

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text using Unicode NFC normalization.

        Args:
            text (str): Text to normalize.

        Returns:
            str: Normalized text.
        """
        return unicodedata.normalize("NFC", text)
