"""Phrase dictionary and phrase stores.

Modules:
- PhraseDictionary: In-memory phrase index with forward, reverse and word-by-word lookups.
- PhraseStoreInterface: Abstract base class of the row sources.
- stores: JSON file, in-memory and REST implementations.
"""

from core.phrases.dictionary import PhraseDictionary
from core.phrases.interface import (
    PhraseRow,
    PhraseStoreError,
    PhraseStoreFormatError,
    PhraseStoreInterface,
    PhraseStoreUnavailableError,
)
from core.phrases.stores import JsonPhraseStore, MemoryPhraseStore, RestPhraseStore

__all__: list[str] = [
    "JsonPhraseStore",
    "MemoryPhraseStore",
    "PhraseDictionary",
    "PhraseRow",
    "PhraseStoreError",
    "PhraseStoreFormatError",
    "PhraseStoreInterface",
    "PhraseStoreUnavailableError",
    "RestPhraseStore",
]
