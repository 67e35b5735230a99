from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Union

import httpx
import pytest

TESTDATA = Path(__file__).parent / "testdata"

Handler = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


class MediaMockServer:
    """In-process stand-in for the media API, served through httpx.MockTransport."""

    host = "media.test"

    def __init__(self) -> None:
        self.documents: Dict[str, bytes] = {}
        self.handlers: Dict[str, Handler] = {}
        self.requests: List[httpx.Request] = []

    def add_document(self, path: str, filename: str) -> None:
        self.documents[path] = (TESTDATA / filename).read_bytes()

    def add_payload(self, path: str, payload: bytes) -> None:
        self.documents[path] = payload

    def add_handler(self, path: str, handler: Handler) -> None:
        self.handlers[path] = handler

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.path)
        if handler is not None:
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response
        data = self.documents.get(request.url.path)
        if data is None:
            return httpx.Response(404)
        return httpx.Response(200, content=data, headers={"Content-Type": "application/json"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


class FailingCloseStream(httpx.AsyncByteStream):
    """Response body that yields its data and then fails to close."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = data

    async def __aiter__(self):
        if self._data:
            yield self._data

    async def aclose(self) -> None:
        raise OSError("connection reset while closing body")


class FailingReadStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        yield b'{"headline": '
        raise httpx.ReadError("connection dropped mid-body")


@pytest.fixture
def server() -> MediaMockServer:
    return MediaMockServer()


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.media")


@pytest.fixture
def weather_doc() -> dict:
    return json.loads((TESTDATA / "ttninjs.weather.rendered.json").read_text(encoding="utf-8"))
