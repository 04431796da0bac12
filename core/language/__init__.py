"""Language metadata and script classification.

Modules:
- LanguageRegistry: Language name normalization and per-language script properties.
- ScriptClassifier: Latin/native script heuristics for text.
"""

from core.language.classifier import ScriptClassifier
from core.language.registry import DEFAULT_LANGUAGES_PATH, LanguageRegistry, LanguageRegistryError

__all__: list[str] = ["DEFAULT_LANGUAGES_PATH", "LanguageRegistry", "LanguageRegistryError", "ScriptClassifier"]
