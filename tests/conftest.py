# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient wired to a temporary upload directory
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("PREFORK", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def upload_dir(tmp_path):
    """Temporary directory uploads are written into."""
    return tmp_path / "target"


@pytest.fixture
def test_settings(upload_dir):
    """Settings pointing uploads at a temporary directory."""
    return Settings(UPLOAD_DIR=upload_dir, MAX_UPLOAD_SIZE_MB=1)


@pytest.fixture
def client(test_settings):
    """
    TestClient with lifespan running and settings overridden.

    Server exceptions are not re-raised so the 500 handler's response can be
    asserted on.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_file_bytes(test_settings):
    """Contents of the bundled sample file."""
    return test_settings.download_file.read_bytes()
