# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an HTTP test client and a throwaway static front-end
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.pop("STATIC_DIR", None)

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app (runs the lifespan handler)."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def static_site(tmp_path, monkeypatch):
    """
    A minimal built front-end wired into the settings.

    Layout:
        index.html
        static/js/main.js
    """
    from app.config import settings

    (tmp_path / "index.html").write_text("<html><body>converter</body></html>")
    js_dir = tmp_path / "static" / "js"
    js_dir.mkdir(parents=True)
    (js_dir / "main.js").write_text("console.log('converter');")

    monkeypatch.setattr(settings, "STATIC_DIR", str(tmp_path))
    return tmp_path
