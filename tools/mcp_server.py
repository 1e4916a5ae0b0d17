# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (quillopy_search)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes ONE MCP tool, quillopy_search, that looks up programming library
#   documentation through the Quillopy API.  The tool is a thin wrapper
#   around core/:
#
#     1. core.search.build_search_request   normalize the arguments
#     2. core.search.search_documents       POST to the API (Found / NoResult)
#     3. core.formatting.format_search_response   render the text answer
#
# HOW IT RUNS:
#   main() builds the server explicitly (create_server), registers the tool
#   and serves it over stdio:
#     a) quillopy-mcp                  (console script)
#     b) python -m tools.mcp_server
#
# ERROR CONTRACT:
#   A documentation lookup never fails at the protocol level.  core/ already
#   turns network and HTTP failures into NoResult; anything unexpected that
#   still escapes is logged here and answered with "No documentation found."
#   Only a startup failure ends the process (exit status 1).
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from core.config import DEFAULT_API_BASE, Settings, load_settings
from core.formatting import NOT_FOUND_TEXT, format_search_response
from core.models import Found
from core.search import build_search_request, search_documents

logger = logging.getLogger(__name__)

SERVER_NAME = "quillopy"
TOOL_NAME = "quillopy_search"
TOOL_DESCRIPTION = (
    "This MCP searches and fetches documentation for programming libraries "
    "and packages. When a user types @quillopy or @quillopy[package_name], "
    "they are requesting to use this tool to access programming documentation."
)


# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  STDOUT carries the MCP JSON stream; a single stray line
# there corrupts the protocol.
#
# ANSI colors make tool traffic easy to scan in a terminal:
#   CYAN    incoming tool calls
#   YELLOW  intermediate status
#   GREEN   responses
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of the text answer in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")
    return text


# =============================================================================
# The tool body
# =============================================================================
# Kept separate from the decorated function so the API base can be bound at
# construction time and the logic can be exercised without a server.
# =============================================================================
async def run_quillopy_search(
    query: str,
    package_name: str,
    language: str,
    namespace: Optional[str] = None,
    *,
    api_base: str = DEFAULT_API_BASE,
) -> str:
    """Run one documentation lookup and return the formatted text."""
    _log_request(TOOL_NAME, query=query, package_name=package_name,
                 language=language, namespace=namespace)

    try:
        request = build_search_request(query, package_name, language, namespace)
        outcome = await search_documents(request, base_url=api_base)

        if isinstance(outcome, Found):
            _log_status(f"Got {len(outcome.result.documents)} documents, "
                        f"{len(outcome.result.instructions)} instructions")
        else:
            _log_status(f"No result: {outcome.reason}")

        text = format_search_response(outcome)
    except Exception:
        logger.exception("Unexpected error in %s", TOOL_NAME)
        text = NOT_FOUND_TEXT

    return _log_response(TOOL_NAME, text)


# =============================================================================
# Server construction
# =============================================================================
# There is no module-level server object.  create_server() builds one,
# registers the tool and hands it back; main() is the only caller in
# production, tests build their own.
# =============================================================================
@asynccontextmanager
async def _announce_ready(server: FastMCP) -> AsyncIterator[None]:
    # Entered once the host transport is up.
    logger.info("Quillopy MCP Server running on stdio")
    yield


def create_server(settings: Optional[Settings] = None) -> FastMCP:
    """Build the FastMCP server with quillopy_search registered."""
    settings = settings or Settings()
    server = FastMCP(SERVER_NAME, lifespan=_announce_ready)

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def quillopy_search(
        query: Annotated[str, Field(
            description="The search query to find specific documentation")],
        package_name: Annotated[str, Field(
            description="The name of the library or package to search documentation for")],
        language: Annotated[str, Field(
            description="The programming language of the package (e.g., python, javascript, java)")],
        namespace: Annotated[Optional[str], Field(
            description="Optional namespace or module within the package to narrow the search")] = None,
    ) -> str:
        return await run_quillopy_search(
            query, package_name, language, namespace,
            api_base=settings.api_base,
        )

    return server


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    try:
        load_dotenv()
        settings = load_settings()
        configure_logging(settings.log_level)
        server = create_server(settings)
        server.run(transport="stdio", show_banner=False)
    except Exception as exc:
        logger.error("Fatal error in main(): %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
