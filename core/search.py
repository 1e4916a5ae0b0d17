# =============================================================================
# core/search.py  —  Request Builder & Quillopy API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. build_search_request() normalizes raw tool arguments into a
#      SearchRequest (lowercasing package, language and namespace).
#   2. search_documents() POSTs that request to the Quillopy API and parses
#      the JSON answer into a SearchResult.
#
# FAILURE POLICY:
#   search_documents() never raises for a failed lookup.  Connection errors,
#   timeouts, non-2xx statuses and undecodable bodies are all logged to
#   stderr and turned into a NoResult.  The tool layer then answers
#   "No documentation found." instead of surfacing a protocol error.
#
# CONCURRENCY:
#   The HTTP call is async (httpx.AsyncClient), so many tool invocations can
#   wait on the network at the same time.  Each call gets its own client
#   unless the caller passes one in; nothing is shared between invocations.
#
# Nothing here imports FastMCP.  This module works in a bare REPL.
# =============================================================================

import logging
from typing import Optional

import httpx

from core.config import DEFAULT_API_BASE
from core.models import Found, NoResult, SearchOutcome, SearchRequest, SearchResult

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "/document-search"


def build_search_request(
    query: str,
    package_name: str,
    language: str,
    namespace: Optional[str] = None,
) -> SearchRequest:
    """Normalize tool arguments into a SearchRequest.

    The query text is passed through untouched.  An empty namespace is
    treated like a missing one.
    """
    return SearchRequest(
        query=query,
        package_name=package_name.lower(),
        language=language.lower(),
        namespace=namespace.lower() if namespace else None,
    )


async def search_documents(
    request: SearchRequest,
    *,
    base_url: str = DEFAULT_API_BASE,
    client: Optional[httpx.AsyncClient] = None,
) -> SearchOutcome:
    """Run one documentation search against the Quillopy API.

    Args:
        request: The normalized query.
        base_url: API base, e.g. "https://quillopy.fly.dev/v1".
        client: Optional caller-owned client.  When omitted, a client is
            created for this call and closed afterwards.

    Returns:
        Found with the parsed result, or NoResult if anything went wrong.
    """
    url = f"{base_url.rstrip('/')}{SEARCH_ENDPOINT}"
    payload = request.to_payload()
    headers = {"Content-Type": "application/json"}

    try:
        # Redirects are followed; only the final response decides success.
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as owned_client:
                response = await owned_client.post(url, json=payload, headers=headers)
        else:
            response = await client.post(
                url, json=payload, headers=headers, follow_redirects=True
            )
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.error("Error making Quillopy request: HTTP error! Status: %s", status)
        return NoResult(reason=f"HTTP {status}")
    except httpx.HTTPError as exc:
        logger.error("Error making Quillopy request: %s: %s", type(exc).__name__, exc)
        return NoResult(reason=type(exc).__name__)
    except ValueError as exc:
        # 2xx with a body that is not JSON
        logger.error("Error making Quillopy request: invalid JSON body: %s", exc)
        return NoResult(reason="invalid JSON")

    return Found(result=SearchResult.from_payload(data))
