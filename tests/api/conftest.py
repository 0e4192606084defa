"""Fixtures for API tests."""

from pathlib import Path

import pytest
from falcon.testing import TestClient

from mdcorpus.config import Settings
from mdcorpus.main import create_mdcorpus_app


@pytest.fixture
def settings(corpus_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        content_dir=corpus_dir,
        cors_origins="http://blog.example",
    )


@pytest.fixture
def app(settings: Settings):
    """Falcon ASGI app over the temporary corpus."""
    return create_mdcorpus_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
