# =============================================================================
# agent/docs_agent.py  —  Google ADK Agent wired to the Quillopy tool server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates a Google ADK agent that answers library questions by calling
#   quillopy_search on our FastMCP server.
#
#   ┌────────────────────────┐    stdio (MCP)    ┌──────────────────────┐
#   │  ADK Agent             │ ────────────────▶ │  tools/mcp_server    │
#   │  LiteLlm model         │                   │  quillopy_search     │
#   │  docs assistant prompt │ ◀──────────────── │                      │
#   └────────────────────────┘    text result    └──────────┬───────────┘
#                                                           │ HTTPS
#                                                           ▼
#                                                ┌──────────────────────┐
#                                                │  Quillopy API        │
#                                                └──────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run python -m
#   tools.mcp_server") from the project root and talks to it over
#   stdin/stdout.  The tool list is discovered automatically.
#
# MODEL:
#   Any LiteLlm model string works.  The default (QUILLOPY_AGENT_MODEL)
#   routes GPT-4o through OpenRouter; LiteLlm reads OPENROUTER_API_KEY from
#   the environment.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset, StdioServerParameters

from agent.prompt import get_docs_assistant_prompt
from core.config import load_settings

AGENT_NAME = "quillopy_docs_assistant"


def _project_root() -> str:
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the documentation assistant agent.

    Args:
        model: LiteLlm model string.  Defaults to the configured
            QUILLOPY_AGENT_MODEL.

    Returns:
        A configured ADK Agent with the Quillopy MCP toolset attached.
    """
    model = model or load_settings().agent_model

    # uv run keeps the subprocess on the project's virtualenv.
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=_project_root(),
        ),
    )

    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=model),
        instruction=get_docs_assistant_prompt(),
        tools=[mcp_tools],
    )
