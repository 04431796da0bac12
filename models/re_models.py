"""Regular expressions shared by the translation engine.

Patterns for whitespace segmentation, Latin-script letter classification and the
Unicode blocks used to guess the script of a text.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = [
    "LATIN_LETTER_PATTERN",
    "SCRIPT_BLOCK_PATTERNS",
    "WHITESPACE_RUN_PATTERN",
]

# Whitespace runs, captured so re.split keeps the separators
# Example: "how  are you" -> ["how", "  ", "are", " ", "you"]
WHITESPACE_RUN_PATTERN: Final[Pattern[str]] = re.compile(r"(\s+)")

# Basic Latin, Latin-1 Supplement, Latin Extended-A and Extended-B
LATIN_LETTER_PATTERN: Final[Pattern[str]] = re.compile(r"[\u0000-\u024F]")

# (block pattern, script, most probable language), checked in order, first match wins
SCRIPT_BLOCK_PATTERNS: Final[tuple[tuple[Pattern[str], str, str], ...]] = (
    # South Asian
    (re.compile(r"[\u0900-\u097F]"), "Devanagari", "hindi"),
    (re.compile(r"[\u0980-\u09FF]"), "Bengali", "bengali"),
    (re.compile(r"[\u0B80-\u0BFF]"), "Tamil", "tamil"),
    (re.compile(r"[\u0C00-\u0C7F]"), "Telugu", "telugu"),
    (re.compile(r"[\u0C80-\u0CFF]"), "Kannada", "kannada"),
    (re.compile(r"[\u0D00-\u0D7F]"), "Malayalam", "malayalam"),
    (re.compile(r"[\u0A80-\u0AFF]"), "Gujarati", "gujarati"),
    (re.compile(r"[\u0A00-\u0A7F]"), "Gurmukhi", "punjabi"),
    (re.compile(r"[\u0B00-\u0B7F]"), "Odia", "odia"),
    (re.compile(r"[\u0D80-\u0DFF]"), "Sinhala", "sinhala"),
    (re.compile(r"[\u0F00-\u0FFF]"), "Tibetan", "tibetan"),
    # East Asian
    (re.compile(r"[\u4E00-\u9FFF\u3400-\u4DBF]"), "Han", "chinese (mandarin)"),
    (re.compile(r"[\u3040-\u309F\u30A0-\u30FF]"), "Japanese", "japanese"),
    (re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF]"), "Hangul", "korean"),
    # Southeast Asian
    (re.compile(r"[\u0E00-\u0E7F]"), "Thai", "thai"),
    (re.compile(r"[\u0E80-\u0EFF]"), "Lao", "lao"),
    (re.compile(r"[\u1000-\u109F]"), "Myanmar", "burmese"),
    (re.compile(r"[\u1780-\u17FF]"), "Khmer", "khmer"),
    # Middle Eastern
    (re.compile(r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF]"), "Arabic", "arabic"),
    (re.compile(r"[\u0590-\u05FF]"), "Hebrew", "hebrew"),
    # European
    (re.compile(r"[\u0400-\u04FF]"), "Cyrillic", "russian"),
    (re.compile(r"[\u0370-\u03FF\u1F00-\u1FFF]"), "Greek", "greek"),
    # Caucasian
    (re.compile(r"[\u10A0-\u10FF]"), "Georgian", "georgian"),
    (re.compile(r"[\u0530-\u058F]"), "Armenian", "armenian"),
    # African
    (re.compile(r"[\u1200-\u139F]"), "Ethiopic", "amharic"),
)
