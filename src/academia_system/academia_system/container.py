from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_LATENCY_SECONDS, STORE_KEY
from .database.connection import JsonFileStorage, KeyValueStorage, StorageConfig
from .database.store import RecordStore
from .directory.service import DirectoryService
from .reports.service import DashboardService
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: RecordStore

    directory: DirectoryService
    auth_service: AuthService
    dashboard_service: DashboardService


def build_container(
    *,
    storage_config: dict | None = None,
    storage: KeyValueStorage | None = None,
    latency_seconds: float = DEFAULT_LATENCY_SECONDS,
) -> Container:
    """Wire the store and services.

    Pass `storage` to supply a ready backend (tests); otherwise a JSON file
    storage is built from `storage_config` (`data_dir`, optional `store_key`).
    """
    storage_config = dict(storage_config or {})
    store_key = str(storage_config.get("store_key") or STORE_KEY)

    if storage is None:
        config = StorageConfig(data_dir=str(storage_config["data_dir"]), store_key=store_key)
        storage = JsonFileStorage.get_instance(config)

    store = RecordStore(storage, key=store_key)
    directory = DirectoryService(store, latency_seconds=latency_seconds)

    return Container(
        storage=storage,
        store=store,
        directory=directory,
        auth_service=AuthService(directory),
        dashboard_service=DashboardService(directory),
    )
