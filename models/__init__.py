"""Data models for the translation engine.

This package contains dataclass definitions for configuration, translation results,
chat views, language metadata, phrase dictionary rows, cache bookkeeping and the
regular expression patterns used throughout the application.
"""

from __future__ import annotations

from models.cache_models import CacheEntry, CacheStatistics, EngineStats
from models.config_models import Config
from models.language_models import DictionaryEntry, LanguageInfo, ScriptDetection
from models.re_models import LATIN_LETTER_PATTERN, SCRIPT_BLOCK_PATTERNS, WHITESPACE_RUN_PATTERN
from models.translation_models import (
    BRIDGED_DIRECTIONS,
    ChatMessageView,
    LanguageProfile,
    ScriptType,
    TranslationDirection,
    TranslationMethod,
    TranslationResult,
    WordByWordResult,
)

__all__: list[str] = [
    "BRIDGED_DIRECTIONS",
    "LATIN_LETTER_PATTERN",
    "SCRIPT_BLOCK_PATTERNS",
    "WHITESPACE_RUN_PATTERN",
    "CacheEntry",
    "CacheStatistics",
    "ChatMessageView",
    "Config",
    "DictionaryEntry",
    "EngineStats",
    "LanguageInfo",
    "LanguageProfile",
    "ScriptDetection",
    "ScriptType",
    "TranslationDirection",
    "TranslationMethod",
    "TranslationResult",
    "WordByWordResult",
]
