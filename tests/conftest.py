# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient and settings fixtures
# =============================================================================

import asyncio
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("API_GATEWAY_BASE_PATH", "/")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """Build Settings without reading a local .env file."""
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def app():
    """A fresh application instance per test."""
    from app.main import create_app
    return create_app()


@pytest.fixture
def client(app):
    """TestClient with the lifespan cycle running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def event_loop_for_lambda():
    """
    Current event loop for Mangum, which drives the ASGI app synchronously
    the same way the Lambda runtime does.
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    asyncio.set_event_loop(None)
    loop.close()


@pytest.fixture
def sample_features():
    """Sample predict payload."""
    return {"feature1": "value"}
