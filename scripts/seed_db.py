from __future__ import annotations

import asyncio
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.academia_system.academia_system.container import build_container
from src.academia_system.academia_system.database.bootstrap import ensure_store, seed_demo


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config={"data_dir": settings.DATA_DIR, "store_key": settings.STORE_KEY})

    ensure_store(container.store)
    created = asyncio.run(seed_demo(container.directory))

    print(f"OK: Seeded store -> {settings.DATA_DIR}/{settings.STORE_KEY} (created={created})")


if __name__ == "__main__":
    main()
