from __future__ import annotations

import logging
from typing import Any

import pytest

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncHttp


class FakeResponse:
    def __init__(self, body: bytes, content_type: str) -> None:
        self.headers: dict[str, str] = {"Content-Type": content_type}
        self._body: bytes = body

    async def read(self) -> bytes:
        return self._body

    def raise_for_status(self) -> None:
        pass

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        pass


class FakeSession:
    def __init__(self, response: FakeResponse) -> None:
        self.response: FakeResponse = response

    def request(self, **kwargs: Any) -> FakeResponse:
        _ = kwargs
        return self.response


async def test_session_is_created_lazily(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()
    assert http.is_open is False
    assert not any("session initialized" in rec.message for rec in caplog.records)

    async with http:
        assert http.is_open is True
        assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)

    assert http.is_open is False


async def test_session_can_be_reopened_after_close() -> None:
    http = AsyncHttp()

    async with http:
        pass
    async with http:
        assert http.is_open is True

    await http.close()
    await http.close()
    assert http.is_open is False


async def test_decode_json_ignores_charset() -> None:
    http = AsyncHttp()

    data: Any = await http.decode_response(
        FakeResponse('[{"english": "hello"}]'.encode(), "application/json; charset=utf-8")  # type: ignore[arg-type]
    )

    assert data == [{"english": "hello"}]


async def test_decode_text_and_empty_body() -> None:
    http = AsyncHttp()

    assert await http.decode_response(FakeResponse("नमस्ते".encode(), "text/plain")) == "नमस्ते"  # type: ignore[arg-type]
    assert await http.decode_response(FakeResponse(b"", "application/json")) is None  # type: ignore[arg-type]


async def test_unknown_content_type_is_rejected() -> None:
    http = AsyncHttp()

    with pytest.raises(AsyncCommInvalidContentTypeError, match="text/html"):
        await http.decode_response(FakeResponse(b"<html></html>", "text/html"))  # type: ignore[arg-type]


async def test_add_handler_replaces_existing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    http = AsyncHttp()

    http.add_handler("text/plain", lambda raw: raw.decode("utf-8").upper())

    assert await http.decode_response(FakeResponse(b"hola", "text/plain")) == "HOLA"  # type: ignore[arg-type]
    assert any("already exists" in rec.message for rec in caplog.records)


def test_comm_error_message() -> None:
    err = AsyncCommError("Error response from the server.")

    assert str(err) == "Error response from the server."
    assert isinstance(AsyncCommInvalidContentTypeError("x"), AsyncCommError)


async def test_get_maps_malformed_body(monkeypatch: pytest.MonkeyPatch) -> None:
    session = FakeSession(FakeResponse(b"{not json", "application/json"))
    monkeypatch.setattr(AsyncHttp, "session", property(lambda self: session))
    http = AsyncHttp()

    with pytest.raises(AsyncCommError, match="malformed"):
        await http.get(url="https://phrases.example.org/rest/v1/common_phrases")


async def test_get_maps_invalid_url() -> None:
    http = AsyncHttp()

    try:
        with pytest.raises(AsyncCommError):
            await http.get(url="http://exa mple:99999", total_timeout=1.0)
    finally:
        await http.close()
