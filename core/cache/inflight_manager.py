from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Generic, TypeVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging


__all__: list[str] = ["InFlightManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T")


class InFlightManager(Generic[T]):
    """Single-flight coordination of concurrent work keyed by a string.

    The first caller of `mark_inflight_start` for a key becomes the producer and gets
    (True, None) back; it must finish with `store_inflight_result` or
    `store_inflight_exception`, or give the work up with `abandon_inflight`. Callers arriving
    while the work is running wait for the producer's outcome instead of repeating the work.

    Args:
        timeout_sec (float | None): How long a waiting caller waits, None for no limit.
    """

    def __init__(self, timeout_sec: float | None = None) -> None:
        self._inflight: dict[str, asyncio.Future[T]] = {}
        self._lock: asyncio.Lock = asyncio.Lock()
        self._timeout_sec: float | None = timeout_sec

    def is_inflight(self, key: str) -> bool:
        return key in self._inflight

    async def cancel_all(self) -> None:
        """Cancel every pending future and clear the in-flight state."""
        async with self._lock:
            for fut in self._inflight.values():
                if not fut.done():
                    fut.cancel()
            self._inflight.clear()
        logger.debug("In-flight state cleared")

    async def mark_inflight_start(self, key: str) -> tuple[bool, T | None]:
        """Register the caller as producer for a key, or wait for the running producer.

        Args:
            key (str): Work identifier.

        Returns:
            tuple[bool, T | None]: (True, None) when the caller is the producer,
            (False, result) when another caller produced the result.

        Raises:
            TimeoutError: If waiting for the producer times out or the work is abandoned.
            asyncio.CancelledError: If the waiting caller itself is cancelled; the work keeps running.
            Exception: Whatever the producer stored with `store_inflight_exception`.
        """
        async with self._lock:
            if key not in self._inflight:
                loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
                self._inflight[key] = loop.create_future()
                logger.debug("Marked in-flight start for key: %s", key[:16])
                return True, None
            fut: asyncio.Future[T] = self._inflight[key]
            logger.debug("In-flight work detected for key: %s", key[:16])

        try:
            result: T = await asyncio.wait_for(asyncio.shield(fut), timeout=self._timeout_sec)
        except TimeoutError:
            logger.warning("In-flight wait timed out for key: %s", key[:16])
            await self._discard(key, fut)
            msg: str = f"In-flight work timed out for key: {key[:16]}"
            raise TimeoutError(msg) from None
        except asyncio.CancelledError:
            if not fut.cancelled():
                # the waiting caller itself was cancelled; the producer keeps running
                raise
            logger.warning("In-flight work abandoned for key: %s", key[:16])
            msg = f"In-flight work abandoned for key: {key[:16]}"
            raise TimeoutError(msg) from None
        else:
            logger.debug("Received in-flight result for key: %s", key[:16])
            return False, result

    async def store_inflight_result(self, key: str, result: T) -> None:
        """Complete the work of a key with a result, waking every waiting caller.

        Args:
            key (str): Work identifier.
            result (T): The produced result.
        """
        async with self._lock:
            fut: asyncio.Future[T] | None = self._inflight.pop(key, None)
            if fut and not fut.done():
                fut.set_result(result)
                logger.debug("Set in-flight result for key: %s", key[:16])
            else:
                logger.warning("No in-flight future found or already done for key: %s when storing result", key[:16])

    async def store_inflight_exception(self, key: str, exc: Exception) -> None:
        """Complete the work of a key with an exception, raised in every waiting caller.

        Args:
            key (str): Work identifier.
            exc (Exception): The exception to propagate.
        """
        async with self._lock:
            fut: asyncio.Future[T] | None = self._inflight.pop(key, None)
            if fut and not fut.done():
                fut.set_exception(exc)
                # nobody may be waiting; avoid "exception was never retrieved" warnings
                fut.exception()
                logger.debug("Set in-flight exception for key: %s", key[:16])
            else:
                logger.warning(
                    "No in-flight future found or already done for key: %s when storing exception", key[:16]
                )

    def abandon_inflight(self, key: str) -> None:
        """Drop the work of a key whose producer stopped without an outcome.

        Waiting callers are released with TimeoutError and the next caller becomes a new producer.
        """
        fut: asyncio.Future[T] | None = self._inflight.pop(key, None)
        if fut is not None and not fut.done():
            fut.cancel()
            logger.debug("Abandoned in-flight work for key: %s", key[:16])

    async def _discard(self, key: str, fut: asyncio.Future[T]) -> None:
        async with self._lock:
            if self._inflight.get(key) is fut:
                self._inflight.pop(key, None)
