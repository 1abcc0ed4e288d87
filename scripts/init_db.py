from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.academia_system.academia_system.container import build_container
from src.academia_system.academia_system.database.bootstrap import ensure_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config={"data_dir": settings.DATA_DIR, "store_key": settings.STORE_KEY})

    state = ensure_store(container.store)
    document = container.store.load()
    print(
        "OK: Store ready -> "
        f"{settings.DATA_DIR}/{settings.STORE_KEY} (found={state.value}, "
        f"students={len(document.students)}, teachers={len(document.teachers)}, admins={len(document.admins)})"
    )


if __name__ == "__main__":
    main()
