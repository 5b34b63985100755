# tests/conftest.py
"""
Shared fixtures for csrf-guard tests.

Configuration is process-wide, so every test starts from built-in defaults.
"""

import os
import tempfile

# Must be set before csrfguard.main is imported anywhere
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="csrfguard-logs-"))
os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest

from csrfguard.core.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Reset CSRF configuration around each test"""
    config = reset_config()
    yield config
    reset_config()


@pytest.fixture
def session_token():
    return "valid-token"


@pytest.fixture
def request_with_session(session_token):
    """Request whose session already holds a token, no headers"""
    return {"session": {"csrfToken": session_token}, "headers": {}}
