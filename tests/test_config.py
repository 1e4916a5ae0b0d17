from __future__ import annotations

import pytest

from core.config import DEFAULT_AGENT_MODEL, DEFAULT_API_BASE, Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("QUILLOPY_API_BASE", "QUILLOPY_LOG_LEVEL", "QUILLOPY_AGENT_MODEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert load_settings() == Settings(
        api_base=DEFAULT_API_BASE,
        log_level="INFO",
        agent_model=DEFAULT_AGENT_MODEL,
    )


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUILLOPY_API_BASE", "http://localhost:8080/v1/")
    monkeypatch.setenv("QUILLOPY_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUILLOPY_AGENT_MODEL", "openrouter/anthropic/claude-3.5-sonnet")

    settings = load_settings()

    assert settings.api_base == "http://localhost:8080/v1"
    assert settings.log_level == "DEBUG"
    assert settings.agent_model == "openrouter/anthropic/claude-3.5-sonnet"


def test_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUILLOPY_LOG_LEVEL", "chatty")
    monkeypatch.setenv("QUILLOPY_API_BASE", "   ")

    settings = load_settings()

    assert settings.log_level == "INFO"
    assert settings.api_base == DEFAULT_API_BASE
