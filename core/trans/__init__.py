"""Direction resolution and pivot translation.

This package classifies a language pair into one of seven translation directions and
translates text along that direction using the phrase dictionary and the transliterator.
"""

from core.trans.direction import needs_bridge, resolve_direction
from core.trans.orchestrator import TranslationOrchestrator, TranslationRequest

__all__: list[str] = [
    "TranslationOrchestrator",
    "TranslationRequest",
    "needs_bridge",
    "resolve_direction",
]
