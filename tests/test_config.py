"""Settings tests."""

from pathlib import Path

import pytest

from mdcorpus.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MDCORPUS_CONTENT_DIR", raising=False)
    settings = Settings(_env_file=None)
    assert settings.content_dir == Path("source/_posts")
    assert settings.strict is False
    assert settings.environment == "development"
    assert settings.port == 8000


def test_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MDCORPUS_CONTENT_DIR", str(tmp_path))
    monkeypatch.setenv("MDCORPUS_STRICT", "true")
    monkeypatch.setenv("MDCORPUS_CORS_ORIGINS", "http://a.example,http://b.example")
    settings = Settings(_env_file=None)
    assert settings.content_dir == tmp_path
    assert settings.strict is True
    assert settings.cors_origins.split(",") == ["http://a.example", "http://b.example"]


def test_get_settings_cached() -> None:
    assert get_settings() is get_settings()
