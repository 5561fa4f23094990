"""Shared pytest fixtures for all tests."""

import pytest

from database.local_storage import LocalStorage
from database.transaction_store import TransactionStore
from services.transaction_service import TransactionService
from utils import app_config


@pytest.fixture
def storage(tmp_path):
    """Create a LocalStorage backed by a file in a temporary directory.

    Returns:
        LocalStorage: Empty storage (the file does not exist yet).
    """
    return LocalStorage(tmp_path / "data" / "storage.json")


@pytest.fixture
def store(storage):
    """Create a TransactionStore on the temporary storage."""
    return TransactionStore(storage)


@pytest.fixture
def tx_service(store):
    """Create a TransactionService with an empty collection loaded."""
    service = TransactionService(store)
    service.load()
    return service


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the bootstrap config at a temporary file.

    Returns:
        Path: Location of the (not yet existing) config.json.
    """
    path = tmp_path / "config" / "config.json"
    monkeypatch.setattr(app_config, "CONFIG_FILE", path)
    return path
