from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def make_document() -> Callable[..., dict[str, str]]:
    def _make(identifier: str, *, link: str | None = None, content: str | None = None) -> dict[str, str]:
        return {
            "link": link or f"https://docs.example/{identifier}",
            "content": content or f"content of {identifier}",
            "semantic_identifier": identifier,
        }

    return _make


@pytest.fixture
def json_api() -> Callable[..., httpx.MockTransport]:
    """Factory for a mock Quillopy API that answers every request with ``body``.

    When ``captured`` is given, the last request's method, url, headers and
    decoded JSON payload are stored in it.
    """

    def _make(body: Any, captured: dict[str, Any] | None = None, status: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if captured is not None:
                captured["method"] = request.method
                captured["url"] = str(request.url)
                captured["headers"] = dict(request.headers)
                captured["payload"] = json.loads(request.content)
            return httpx.Response(status, json=body)

        return httpx.MockTransport(handler)

    return _make
