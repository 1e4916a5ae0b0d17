# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  The entry points
# (tools/mcp_server.py and main.py) call load_dotenv() first, so a local
# .env file works too:
#
#   QUILLOPY_API_BASE     Base URL of the Quillopy API
#                         (default: https://quillopy.fly.dev/v1)
#   QUILLOPY_LOG_LEVEL    DEBUG | INFO | WARNING | ERROR  (default: INFO)
#   QUILLOPY_AGENT_MODEL  LiteLlm model string for the demo agent
#                         (default: openrouter/openai/gpt-4o)
#
# Settings are read once at startup and never mutated afterwards.
# =============================================================================

import os
from dataclasses import dataclass

DEFAULT_API_BASE = "https://quillopy.fly.dev/v1"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for the server and the demo agent."""

    api_base: str = DEFAULT_API_BASE
    log_level: str = DEFAULT_LOG_LEVEL
    agent_model: str = DEFAULT_AGENT_MODEL


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults.

    Empty values count as unset.  An unknown log level falls back to INFO.
    """
    api_base = os.getenv("QUILLOPY_API_BASE", "").strip() or DEFAULT_API_BASE

    log_level = os.getenv("QUILLOPY_LOG_LEVEL", "").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL

    agent_model = os.getenv("QUILLOPY_AGENT_MODEL", "").strip() or DEFAULT_AGENT_MODEL

    return Settings(
        api_base=api_base.rstrip("/"),
        log_level=log_level,
        agent_model=agent_model,
    )
