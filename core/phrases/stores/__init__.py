"""Phrase store implementations.

Importing this package registers every store with PhraseStoreInterface.

Modules:
- JsonPhraseStore: Rows read from a local JSON file.
- MemoryPhraseStore: Rows handed in by the caller.
- RestPhraseStore: Rows fetched from a PostgREST-style HTTP endpoint.
"""

from core.phrases.stores.json_store import DEFAULT_PHRASES_PATH, JsonPhraseStore
from core.phrases.stores.memory_store import MemoryPhraseStore
from core.phrases.stores.rest_store import RestPhraseStore

__all__: list[str] = ["DEFAULT_PHRASES_PATH", "JsonPhraseStore", "MemoryPhraseStore", "RestPhraseStore"]
