# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from jsonmend.infrastructure.config import ConfigLoader
from jsonmend.infrastructure.config import _loader


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    yield

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory so no jsonmend.json is picked up"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_loader, "_default_config", None)
    return tmp_path


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path"""

    def _write(content: str, name: str = "config.json") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def default_config(isolated_cwd: Path) -> ConfigLoader:
    """Configuration built purely from defaults"""
    return ConfigLoader()


@pytest.fixture
def sample_document():
    """Small nested document used by lookup tests"""
    return {
        "user": {"name": "Ada", "roles": ["admin", "dev"], "manager": None},
        "items": [{"id": 1, "tags": []}, {"id": 2, "tags": ["x"]}],
        "0": "zero key",
        "007": "bond",
        "active": False,
    }
