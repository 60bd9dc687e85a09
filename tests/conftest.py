"""Pytest configuration and fixtures."""

import io
import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_env_file(temp_dir: Path) -> Path:
    """Create a mock .env file."""
    env_file = temp_dir / ".env"
    env_file.write_text(
        """TERMASK_CONFIRM_MESSAGE=Really? y/n
TERMASK_COLOR_SYSTEM=none
TERMASK_LOG_LEVEL=debug
"""
    )
    return env_file


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from actual environment variables."""
    # setenv first so monkeypatch also undoes values a .env file loads later
    for key in ("TERMASK_CONFIRM_MESSAGE", "TERMASK_COLOR_SYSTEM", "TERMASK_LOG_LEVEL"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
