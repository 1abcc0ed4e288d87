from __future__ import annotations

from typing import Optional

import pytest

from src.academia_system.academia_system.database.store import RecordStore
from src.academia_system.academia_system.directory.service import DirectoryService


class InMemoryStorage:
    """Dict-backed key/value storage; `writes` counts set_item calls."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage) -> RecordStore:
    return RecordStore(storage)


@pytest.fixture
def directory(store) -> DirectoryService:
    return DirectoryService(store)
