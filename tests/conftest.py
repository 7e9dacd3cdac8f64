"""Pytest configuration and fixtures."""

import pytest
import structlog
from fastapi.testclient import TestClient

from mini_quora.api.app import create_app
from mini_quora.config import Settings, reset_settings


@pytest.fixture
def settings() -> Settings:
    """Settings with no demo post and no .env file."""
    return Settings(_env_file=None, seed_demo_post=False)


@pytest.fixture
def app(settings):
    """A fresh application (and so a fresh, empty store)."""
    return create_app(settings=settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create a TestClient for the app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def store(app):
    """The store behind ``app``."""
    return app.state.store


@pytest.fixture(autouse=True)
def _isolate_global_state():
    """Undo settings caching and logging configuration between tests."""
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def sample_fields():
    """Fields for a typical post."""
    return {
        "title": "Hi",
        "author": "A",
        "body": "B",
        "tags": ["x", "y"],
    }
