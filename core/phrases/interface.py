"""Abstract base class for phrase stores and the related exceptions.

A phrase store is the data source of the phrase dictionary: it returns rows that carry an
English phrase plus one column per language. Concrete stores register themselves by name when
their class is defined, so the engine can pick one from configuration.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = [
    "PhraseRow",
    "PhraseStoreError",
    "PhraseStoreFormatError",
    "PhraseStoreInterface",
    "PhraseStoreUnavailableError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

PhraseRow: TypeAlias = dict[str, Any]


class PhraseStoreError(Exception):
    """An error occurred while reading the phrase store."""


class PhraseStoreUnavailableError(PhraseStoreError):
    """The phrase store could not be reached."""


class PhraseStoreFormatError(PhraseStoreError):
    """The phrase store returned data that is not a list of rows."""


class PhraseStoreInterface(ABC):
    """Abstract base class for phrase stores.

    Attributes:
        registered (ClassVar[dict[str, type[PhraseStoreInterface]]]): Registered store classes,
            keyed by their distinguished names.
    """

    registered: ClassVar[dict[str, type[PhraseStoreInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Args:
            **kwargs: Additional keyword arguments passed to parent class.

        Raises:
            TypeError: If the subclass does not provide fetch_store_name().
            ValueError: If another store is already registered under the same name.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_store_name") or not callable(cls.fetch_store_name):
            msg = "Subclasses of PhraseStoreInterface must implement the static method fetch_store_name()."
            raise TypeError(msg)

        name: Any = cls.fetch_store_name()
        if not isinstance(name, str) or name == "":
            return  # test doubles may stay unregistered

        if name in cls.registered:
            msg = f"A phrase store with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    @classmethod
    def create(cls, config: Config) -> PhraseStoreInterface:
        """Instantiate and initialize the store selected by `PHRASE_STORE.TYPE`.

        Args:
            config (Config): Application configuration.

        Returns:
            PhraseStoreInterface: The initialized store.

        Raises:
            PhraseStoreError: If no store is registered under the configured name.
        """
        name: str = config.PHRASE_STORE.TYPE
        store_class: type[PhraseStoreInterface] | None = cls.registered.get(name)
        if store_class is None:
            msg = f"Unknown phrase store '{name}' (registered: {', '.join(cls.registered)})"
            raise PhraseStoreError(msg)
        store: PhraseStoreInterface = store_class()
        store.initialize(config)
        logger.info("Phrase store '%s' selected", name)
        return store

    @staticmethod
    @abstractmethod
    def fetch_store_name() -> str:
        """Fetch the distinguished name of the store.

        Called during class registration in __init_subclass__, so the implementation must be
        available at subclass definition time.

        Returns:
            str: The store name used in `PHRASE_STORE.TYPE`.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Configure the store from the application configuration.

        Args:
            config (Config): Application configuration.
        """
        raise NotImplementedError

    @abstractmethod
    async def fetch_rows(self, limit: int) -> list[PhraseRow]:
        """Return at most `limit` phrase rows.

        Args:
            limit (int): Maximum number of rows to return.

        Returns:
            list[PhraseRow]: Rows with an 'english' field, an optional 'phrase_key' and language columns.

        Raises:
            PhraseStoreUnavailableError: If the store cannot be reached.
            PhraseStoreFormatError: If the store answers with malformed data.
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release resources held by the store. Stores without resources keep the default."""
        return

    @staticmethod
    def get_authentication_key(variable: str) -> str:
        """Read a credential from an environment variable.

        Args:
            variable (str): Environment variable name.

        Returns:
            str: The credential, or an empty string if the variable is not set.
        """
        return os.getenv(variable, "") if variable else ""

    @staticmethod
    def validate_rows(rows: Any, source: str) -> list[PhraseRow]:
        """Keep the mapping entries of a decoded row list.

        Args:
            rows (Any): Decoded store payload.
            source (str): Store description used in error messages.

        Returns:
            list[PhraseRow]: The rows that are mappings.

        Raises:
            PhraseStoreFormatError: If the payload is not a list.
        """
        if not isinstance(rows, list):
            msg = f"'{source}' did not return a list of phrase rows"
            raise PhraseStoreFormatError(msg)
        valid: list[PhraseRow] = [row for row in rows if isinstance(row, dict)]
        if len(valid) != len(rows):
            logger.warning("Skipped %d malformed phrase rows from '%s'", len(rows) - len(valid), source)
        return valid
