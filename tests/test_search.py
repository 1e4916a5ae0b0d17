from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from core.models import Found, NoResult, SearchResult
from core.search import build_search_request, search_documents

pytestmark = pytest.mark.anyio

API_BASE = "https://quillopy.test/v1"


def test_build_request_lowercases_package_and_language() -> None:
    request = build_search_request("How To Read CSV", "Pandas", "Python")

    assert request.package_name == "pandas"
    assert request.language == "python"
    assert request.query == "How To Read CSV"
    assert request.namespace is None


def test_build_request_lowercases_namespace() -> None:
    request = build_search_request("q", "NumPy", "PYTHON", namespace="LinAlg")

    assert request.namespace == "linalg"


def test_build_request_drops_empty_namespace() -> None:
    request = build_search_request("q", "numpy", "python", namespace="")

    assert request.namespace is None
    assert "namespace" not in request.to_payload()


async def test_search_posts_json_to_document_search(json_api, make_document) -> None:
    captured: dict[str, Any] = {}
    body = {"instructions": ["Import as pd"], "documents": [make_document("pandas.read_csv")]}
    request = build_search_request("how to read csv", "Pandas", "Python")

    async with httpx.AsyncClient(transport=json_api(body, captured)) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert captured["method"] == "POST"
    assert captured["url"] == f"{API_BASE}/document-search"
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["payload"] == {
        "query": "how to read csv",
        "package_name": "pandas",
        "language": "python",
    }
    assert isinstance(outcome, Found)
    assert outcome.result.instructions == ["Import as pd"]
    assert outcome.result.documents[0].semantic_identifier == "pandas.read_csv"


async def test_search_sends_namespace_when_given(json_api) -> None:
    captured: dict[str, Any] = {}
    request = build_search_request("q", "numpy", "python", namespace="Linalg")

    async with httpx.AsyncClient(transport=json_api({"documents": []}, captured)) as client:
        await search_documents(request, base_url=f"{API_BASE}/", client=client)

    assert captured["url"] == f"{API_BASE}/document-search"
    assert captured["payload"]["namespace"] == "linalg"


async def test_search_returns_no_result_on_error_status(json_api, caplog) -> None:
    request = build_search_request("q", "numpy", "python")

    async with httpx.AsyncClient(transport=json_api({"error": "boom"}, status=500)) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert outcome == NoResult(reason="HTTP 500")
    assert "Status: 500" in caplog.text


async def test_search_returns_no_result_on_connection_refused() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    request = build_search_request("q", "numpy", "python")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert isinstance(outcome, NoResult)
    assert outcome.reason == "ConnectError"


async def test_search_returns_no_result_on_invalid_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    request = build_search_request("q", "numpy", "python")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert outcome == NoResult(reason="invalid JSON")


async def test_search_tolerates_unexpected_shape(json_api) -> None:
    request = build_search_request("q", "numpy", "python")

    async with httpx.AsyncClient(transport=json_api({"unexpected": True})) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert outcome == Found(result=SearchResult())


async def test_search_follows_redirect_to_final_response(make_document) -> None:
    seen: list[tuple[str, dict[str, Any]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, json.loads(request.content)))
        if request.url.path == "/v1/document-search":
            return httpx.Response(308, headers={"Location": "https://quillopy.test/v2/document-search"})
        return httpx.Response(200, json={"documents": [make_document("numpy.array")]})

    request = build_search_request("q", "NumPy", "python")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        outcome = await search_documents(request, base_url=API_BASE, client=client)

    assert isinstance(outcome, Found)
    assert [doc.semantic_identifier for doc in outcome.result.documents] == ["numpy.array"]
    assert [path for path, _ in seen] == ["/v1/document-search", "/v2/document-search"]
    assert seen[1][1]["package_name"] == "numpy"
