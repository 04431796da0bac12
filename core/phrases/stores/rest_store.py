"""Phrase store backed by a PostgREST-style HTTP endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.phrases.interface import PhraseRow, PhraseStoreInterface, PhraseStoreUnavailableError
from handlers.async_comm import AsyncCommError, AsyncHttp
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config

__all__: list[str] = ["RestPhraseStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class RestPhraseStore(PhraseStoreInterface):
    """Fetch phrase rows with `GET {URL}/rest/v1/{TABLE}?select=*&limit=N`.

    The API key is read from the environment variable named by `PHRASE_STORE.API_KEY_ENV` and
    sent both as the `apikey` header and as a bearer token. Each request is bounded by
    `PHRASE_STORE.TIMEOUT` seconds.
    """

    def __init__(self) -> None:
        self._http: AsyncHttp | None = None
        self._base_url: str = ""
        self._table: str = "common_phrases"
        self._api_key_env: str = ""
        self._timeout: float = 10.0

    @staticmethod
    def fetch_store_name() -> str:
        return "rest"

    def initialize(self, config: Config) -> None:
        self._base_url = config.PHRASE_STORE.URL.strip().rstrip("/")
        self._table = config.PHRASE_STORE.TABLE.strip() or "common_phrases"
        self._api_key_env = config.PHRASE_STORE.API_KEY_ENV.strip()
        self._timeout = config.PHRASE_STORE.TIMEOUT
        logger.debug("RestPhraseStore endpoint '%s', table '%s'", self._base_url, self._table)

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/rest/v1/{self._table}"

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        api_key: str = self.get_authentication_key(self._api_key_env)
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        else:
            logger.warning("Environment variable '%s' is not set; requesting without credentials", self._api_key_env)
        return headers

    async def fetch_rows(self, limit: int) -> list[PhraseRow]:
        if not self._base_url:
            msg = "Phrase store URL is not configured"
            raise PhraseStoreUnavailableError(msg)
        if self._http is None:
            self._http = AsyncHttp()

        try:
            payload: Any = await self._http.get(
                url=self.endpoint,
                params={"select": "*", "limit": str(max(limit, 0))},
                headers=self._headers(),
                total_timeout=self._timeout,
            )
        except AsyncCommError as err:
            msg = f"Failed to fetch phrases from '{self.endpoint}': {err}"
            raise PhraseStoreUnavailableError(msg) from err
        else:
            return self.validate_rows(payload, self.endpoint)

    async def close(self) -> None:
        if self._http is not None:
            await self._http.close()
            self._http = None
