"""Phrase store holding its rows in memory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.phrases.interface import PhraseRow, PhraseStoreInterface
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from models.config_models import Config

__all__: list[str] = ["MemoryPhraseStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class MemoryPhraseStore(PhraseStoreInterface):
    """Serve phrase rows handed in by the caller.

    Args:
        rows (Iterable[PhraseRow] | None): Initial rows.
    """

    def __init__(self, rows: Iterable[PhraseRow] | None = None) -> None:
        self._rows: list[PhraseRow] = [dict(row) for row in rows or ()]

    @staticmethod
    def fetch_store_name() -> str:
        return "memory"

    def initialize(self, config: Config) -> None:
        _ = config
        logger.debug("MemoryPhraseStore holds %d rows", len(self._rows))

    def add_rows(self, rows: Iterable[PhraseRow]) -> None:
        self._rows.extend(dict(row) for row in rows)

    async def fetch_rows(self, limit: int) -> list[PhraseRow]:
        return [dict(row) for row in self._rows[: max(limit, 0)]]
