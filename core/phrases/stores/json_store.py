"""Phrase store reading a JSON file of rows."""

from __future__ import annotations

import asyncio
import json
from json import JSONDecodeError
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from core.phrases.interface import (
    PhraseRow,
    PhraseStoreFormatError,
    PhraseStoreInterface,
    PhraseStoreUnavailableError,
)
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["DEFAULT_PHRASES_PATH", "JsonPhraseStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DEFAULT_PHRASES_PATH: Final[Path] = Path(__file__).resolve().parents[2] / "data" / "common_phrases.json"


class JsonPhraseStore(PhraseStoreInterface):
    """Read phrase rows from a UTF-8 JSON file holding a list of objects.

    The file is read in a worker thread so the event loop is not blocked.
    `PHRASE_STORE.PATH` selects the file; the packaged phrase list is used when it is empty.
    """

    def __init__(self) -> None:
        self._path: Path = DEFAULT_PHRASES_PATH

    @staticmethod
    def fetch_store_name() -> str:
        return "json"

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self, config: Config) -> None:
        configured: str = config.PHRASE_STORE.PATH.strip()
        self._path = FileUtils.resolve_path(configured) if configured else DEFAULT_PHRASES_PATH
        logger.debug("JsonPhraseStore reads '%s'", self._path)

    async def fetch_rows(self, limit: int) -> list[PhraseRow]:
        rows: list[PhraseRow] = await asyncio.to_thread(self._read_rows)
        return rows[: max(limit, 0)]

    def _read_rows(self) -> list[PhraseRow]:
        logger.info("file open '%s' as read-only", self._path)
        msg: str
        try:
            with self._path.open(mode="r", encoding="utf-8") as fhdl:
                payload: Any = json.load(fhdl)
        except OSError as err:
            logger.debug(err)
            msg = f"failed to load '{self._path}'"
            raise PhraseStoreUnavailableError(msg) from err
        except JSONDecodeError as err:
            logger.debug(err)
            msg = f"'{self._path}' is an invalid JSON format"
            raise PhraseStoreFormatError(msg) from err
        except UnicodeDecodeError as err:
            logger.debug(err)
            msg = f"'{self._path}' is not UTF-8 encoded"
            raise PhraseStoreFormatError(msg) from err
        return self.validate_rows(payload, str(self._path))
