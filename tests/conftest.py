"""
Pytest configuration and shared fixtures for testing.
"""

import logging

import pytest

from unit_converter import ConversionSession


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the user's environment out of settings-driven tests"""
    for name in ("LOG_LEVEL", "PRECISION", "STRICT", "DEFAULT_CATEGORY"):
        monkeypatch.delenv(f"UNIT_CONVERTER_{name}", raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; undo it after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def session():
    """Fresh strict session on the default category"""
    return ConversionSession()


@pytest.fixture
def lenient_session():
    """Session that falls back instead of raising"""
    return ConversionSession(strict=False)
