"""
Pytest configuration and shared fixtures for counterlist tests.

Stores built here never read the environment: settings point at a
temporary directory and storage is either in memory or a temp file.
"""

import json

import pytest

from counterlist.core.config import Settings
from counterlist.interface.store import CounterStore
from counterlist.storage.engine import InMemoryStorage
from counterlist.storage.json_store import JsonFileStorage


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def sync_settings(tmp_path):
    """Settings with inline saves, rooted in a temp directory."""
    return Settings(data_dir=tmp_path, async_saves=False)


@pytest.fixture
def async_settings(tmp_path):
    """Settings with background saves, rooted in a temp directory."""
    return Settings(data_dir=tmp_path, async_saves=True)


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def memory_storage():
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def counters_file(tmp_path):
    """Path of the counters file inside the temp directory."""
    return tmp_path / "counters.json"


@pytest.fixture
def write_counters(counters_file):
    """Write raw JSON content (or a Python object) to the counters file."""
    def _write(content):
        if isinstance(content, str):
            counters_file.write_text(content, encoding="utf-8")
        else:
            counters_file.write_text(json.dumps(content), encoding="utf-8")
        return counters_file
    return _write


@pytest.fixture
def sample_records():
    """Persisted records for three counters."""
    return [
        {"name": "Laps", "initialValue": 10, "value": 14, "colorName": "Red", "colorHex": "#C62828"},
        {"name": "Push-ups", "initialValue": 0, "value": 25, "colorName": "Green", "colorHex": "#2E7D32"},
        {"name": "Coffee", "initialValue": 0, "value": 3, "colorName": "Teal", "colorHex": "#00695C"},
    ]


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store(memory_storage, sync_settings):
    """Store over in-memory storage with inline saves."""
    s = CounterStore(storage=memory_storage, settings=sync_settings)
    yield s
    s.close()


@pytest.fixture
def file_store(counters_file, async_settings):
    """Store over the temp counters file with background saves."""
    s = CounterStore(storage=JsonFileStorage(counters_file), settings=async_settings)
    yield s
    s.close()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that touch the filesystem"
    )
