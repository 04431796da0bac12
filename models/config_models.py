"""Configuration data models for the translation engine.

Each dataclass mirrors one section of the INI configuration file. Every field has a
default, so ``Config()`` is a working configuration without any file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Config",
    "EngineSettings",
    "General",
    "LanguageSettings",
    "PhraseStoreSettings",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""


@dataclass
class EngineSettings:
    CACHE_MAX_ENTRIES: int = 5000
    CACHE_TTL_SEC: float = 60.0
    PHRASE_LIMIT: int = 2000


@dataclass
class PhraseStoreSettings:
    TYPE: str = "json"
    PATH: str = ""
    URL: str = ""
    TABLE: str = "common_phrases"
    API_KEY_ENV: str = "PHRASE_STORE_API_KEY"
    TIMEOUT: float = 10.0


@dataclass
class LanguageSettings:
    PATH: str = ""
    ALIASES: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    ENGINE: EngineSettings = field(default_factory=EngineSettings)
    PHRASE_STORE: PhraseStoreSettings = field(default_factory=PhraseStoreSettings)
    LANGUAGES: LanguageSettings = field(default_factory=LanguageSettings)
