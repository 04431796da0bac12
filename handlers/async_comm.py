"""Asynchronous HTTP utilities.

This module provides the `AsyncHttp` client used by the remote phrase store. It wraps an
aiohttp session, applies a total timeout to every request and decodes responses through
content type handlers. Transport failures are reported as `AsyncCommError` subclasses.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession
from aiohttp.web_exceptions import HTTPError

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncCommError", "AsyncCommInvalidContentTypeError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client for fetching JSON or text resources.

    Responses are decoded by the handler registered for their content type. The session is
    created lazily on first use and can be reopened after `close()`.
    """

    def __init__(self) -> None:
        """Initialize the AsyncHttp client.

        The default handlers include:
            - "text/plain": Decodes bytes to a UTF-8 string.
            - "application/json": Parses bytes as JSON.
            - "application/vnd.pgrst.object+json": Parses bytes as JSON (PostgREST single object).
        """
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))
        self.add_handler("application/vnd.pgrst.object+json", lambda x: json.loads(x.decode("utf-8")))

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self) -> None:
        """Create the aiohttp session unless an open one exists."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    @property
    def session(self) -> ClientSession:
        """Get the current aiohttp session, creating it when needed."""
        self.initialize_session()
        if self.__session is None:
            msg = "Session could not be initialized"
            raise RuntimeError(msg)
        return self.__session

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(
        self,
        *,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        total_timeout: float = 10.0,
    ) -> Any:
        """Perform an asynchronous HTTP GET request.

        Args:
            url (str): The URL to send the GET request to.
            params (Mapping[str, str] | None): Optional query parameters.
            headers (Mapping[str, str] | None): Optional request headers.
            total_timeout (float): Total timeout for the request in seconds.

        Returns:
            Any: The decoded response data, None for an empty body.

        Raises:
            AsyncCommTimeoutError: If the server does not answer in time.
            AsyncCommError: If the request cannot be sent, the server answers with an error status
                or the response body cannot be decoded.
            AsyncCommInvalidContentTypeError: If no handler exists for the response content type.
        """
        logger.debug("'url': '%s', 'params': '%s', 'timeout': '%s'", url, params, total_timeout)
        return await self._request(
            "GET",
            url=url,
            params=dict(params or {}),
            headers=dict(headers or {}),
            total_timeout=total_timeout,
        )

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Parse the response body according to its 'Content-Type' header.

        Args:
            resp (ClientResponse): The response object from the aiohttp request.

        Returns:
            Any: The parsed response data, or None for an empty body.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the content type.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler:
            return handler(raw)

        msg: str = f"Unknown Content-Type '{content_type}'"
        raise AsyncCommInvalidContentTypeError(msg)

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Add a custom handler for a specific content type.

        Args:
            content_type (str): The content type to handle (e.g., "text/plain", "application/json").
            handler (Callable[[bytes], Any]): A function that takes bytes and returns the parsed data.
        """
        if self.content_handlers.get(content_type):
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler
        logger.debug("Added handler for content type '%s'", content_type)

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        total_timeout: float,
        **kwargs: Any,
    ) -> Any:
        """Perform an asynchronous HTTP request.

        Args:
            method (HTTPMethod): The HTTP method to use.
            url (str): The URL to send the request to.
            total_timeout (float): Total timeout for the request in seconds, 0 or less for none.
            **kwargs: Additional keyword arguments passed to the aiohttp request.

        Returns:
            Any: The decoded response data.
        """
        if total_timeout <= 0:
            _timeout = aiohttp.ClientTimeout(total=None)
        elif total_timeout < CONNECT_TIMEOUT:
            # a connect timeout longer than the total would never fire
            _timeout = aiohttp.ClientTimeout(total=total_timeout)
        else:
            _timeout = aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

        try:
            async with self.session.request(method=method, url=url, timeout=_timeout, **kwargs) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "The server is not running, or the port is closed."
            raise AsyncCommError(msg) from err
        except (HTTPError, aiohttp.ClientResponseError) as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = f"The request to the server failed: {err.__class__.__name__}"
            raise AsyncCommError(msg) from err
        except ValueError as err:
            # malformed body rejected by a content handler
            logger.debug(err)
            msg = "The server returned a malformed response body."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors.

    The HTTP status is appended to the message when a response error is passed as `response`.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)

        rsp: HTTPError | aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, (HTTPError, aiohttp.ClientResponseError)):
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """A request did not complete within its timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response content type has no registered handler."""
