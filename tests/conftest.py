# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides settings and logger fixtures shared by the component tests
# =============================================================================

import logging
import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("MONGO_URI", "mongodb://127.0.0.1:1/starter")
os.environ.setdefault("MONGO_TIMEOUT_MS", "200")
os.environ.setdefault("EMAIL_USER", "sender@example.com")
os.environ.setdefault("EMAIL_PASS", "test-email-pass")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("RUN_DEMO", "false")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "starter-server-tests.log"))
os.environ.setdefault("ENVIRONMENT", "development")

import pytest

from app.config import Settings


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the process environment."""
    return Settings(
        JWT_SECRET="test-jwt-secret",
        MONGO_URI="mongodb://127.0.0.1:1/starter",
        MONGO_TIMEOUT_MS=200,
        EMAIL_USER="sender@example.com",
        EMAIL_PASS="test-email-pass",
        BCRYPT_ROUNDS=4,
        RUN_DEMO=False,
        DEMO_FETCH_URL="https://api.example.com/todos/1",
        LOG_FILE=str(tmp_path / "test.log"),
    )


@pytest.fixture
def test_logger():
    """A logger that propagates to the root so caplog can see it."""
    logger = logging.getLogger("tests.starter_server")
    logger.setLevel(logging.DEBUG)
    return logger
