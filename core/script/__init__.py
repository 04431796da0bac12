"""Table-driven transliteration between romanized input and native scripts.

Modules:
- ScriptGrammar / GrammarRegistry: Per-script conversion tables and their selection by language.
- Transliterator: Latin -> native and native -> Latin conversion.
"""

from core.script.grammar import GrammarRegistry, ScriptGrammar
from core.script.tables import BUILTIN_GRAMMARS, LANGUAGE_SCRIPTS
from core.script.transliterator import Transliterator

__all__: list[str] = ["BUILTIN_GRAMMARS", "LANGUAGE_SCRIPTS", "GrammarRegistry", "ScriptGrammar", "Transliterator"]
