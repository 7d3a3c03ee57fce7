"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from core.config import Settings


def _settings(**values: object) -> Settings:
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


def test_defaults(monkeypatch):
    for name in (
        "PORT",
        "HOST",
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "GENERATION_TIMEOUT_SECONDS",
        "STATIC_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = _settings()

    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"
    assert settings.GEMINI_API_KEY is None
    assert settings.GEMINI_MODEL == "gemini-2.5-flash"
    assert settings.GENERATION_TIMEOUT_SECONDS == 60.0
    assert settings.STATIC_DIR is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("GENERATION_TIMEOUT_SECONDS", "2.5")

    settings = _settings()

    assert settings.PORT == 8080
    assert settings.GEMINI_API_KEY == "from-env"
    assert settings.GENERATION_TIMEOUT_SECONDS == 2.5


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4000\nUNRELATED=1\n")

    settings = Settings(_env_file=env_file)  # type: ignore[call-arg]

    assert settings.PORT == 4000


@pytest.mark.parametrize(
    "values",
    [
        {"PORT": 0},
        {"PORT": 70000},
        {"GENERATION_TIMEOUT_SECONDS": 0},
        {"ENVIRONMENT": "staging"},
    ],
)
def test_invalid_values_rejected(values):
    with pytest.raises(ValidationError):
        _settings(**values)


def test_empty_environment_values_use_defaults(monkeypatch):
    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("GEMINI_MODEL", "")

    settings = _settings()

    assert settings.PORT == 3000
    assert settings.GEMINI_API_KEY is None
    assert settings.GEMINI_MODEL == "gemini-2.5-flash"
