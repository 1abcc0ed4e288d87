from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from ..core.constants import STORE_KEY


@dataclass
class StorageConfig:
    data_dir: str
    store_key: str = STORE_KEY


class KeyValueStorage(Protocol):
    """String slots addressed by key, the same contract as browser local storage."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class JsonFileStorage(KeyValueStorage):
    """One file per key under `data_dir`.

    Note: writes go to a temp file in the same directory and are swapped in with
    os.replace, so a reader never sees a half-written document.
    """

    _instances: dict[str, "JsonFileStorage"] = {}

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    @classmethod
    def get_instance(cls, config: StorageConfig) -> "JsonFileStorage":
        key = str(Path(config.data_dir).resolve())
        if key not in cls._instances:
            cls._instances[key] = JsonFileStorage(config.data_dir)
        return cls._instances[key]

    @property
    def data_dir(self) -> Path:
        return self._dir

    def path_for(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, self.path_for(key))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)
