"""Shared test fixtures for the productive view helpers."""

import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from productive.config import clear_config_cache


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Ensure every test reads config files from disk."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed naive reference moment (Tuesday 2024-03-05 12:00)."""
    return datetime(2024, 3, 5, 12, 0, 0)


@pytest.fixture
def fixed_now_utc() -> datetime:
    """A fixed aware reference moment in UTC."""
    return datetime(2024, 3, 5, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def write_config(temp_dir: Path):
    """Return a function that writes a config.toml and returns its path."""

    def _write(content: str) -> Path:
        path = temp_dir / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
