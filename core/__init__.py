"""Offline meaning-pivot translation and transliteration engine.

This package contains the engine facade and its parts: language metadata, script grammars,
the phrase dictionary, the translation orchestrator, the result cache and the chat view builder.
"""

from core.engine import TranslationEngine
from core.version import VERSION

__all__: list[str] = [
    "VERSION",
    "TranslationEngine",
]
