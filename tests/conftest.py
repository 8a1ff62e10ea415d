"""Shared fixtures for the Linkser test suite."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from linkser.models.app_state import AppState
from linkser.models.registry import LinkRegistry
from linkser.models.storage import Storage, reset_storage
from linkser.services.state_service import StateService


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep every test away from the real application data directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("LINKSER_DATA_DIR", str(data_dir))
    reset_storage()
    yield data_dir
    reset_storage()


@pytest.fixture
def storage(tmp_path):
    storage = Storage(tmp_path / "test.db")
    storage.initialize_schema()
    yield storage
    storage.close()


@pytest.fixture
def state_service(storage):
    return StateService(storage)


@pytest.fixture
def registry():
    return LinkRegistry()


@pytest.fixture
def populated_state():
    """State with three links, one labeled twice, the second selected."""
    state = AppState()
    state.registry.add_link("https://a.com")
    state.registry.add_link("https://b.com")
    state.registry.add_link("https://c.com")
    state.registry.add_label("https://a.com", "news")
    state.registry.add_label("https://a.com", "tech")
    state.registry.select("https://b.com")
    return state
