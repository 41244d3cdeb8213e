"""Pytest configuration and shared fixtures."""

import os
from typing import Generator

import pytest

from tsdbtime.config import settings as settings_module
from tsdbtime.core import reset_default_timezone


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Clean environment variables before and after test."""
    # Save original environment
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("TSDBTIME_"):
            del os.environ[key]
    settings_module._settings = None

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_timezone_state() -> Generator[None, None, None]:
    """Drop the context default timezone and cached settings after each test."""
    yield
    reset_default_timezone()
    settings_module._settings = None
