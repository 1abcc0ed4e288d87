"""Sao lưu dữ liệu.

Note: Script này sao chép file JSON của store vào thư mục ./backups kèm thời gian.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.academia_system.academia_system.database.connection import JsonFileStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    source = JsonFileStorage(settings.DATA_DIR).path_for(settings.STORE_KEY)
    if not source.exists():
        raise SystemExit(f"Không tìm thấy store tại {source}. Hãy chạy scripts/init_db.py trước.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{settings.STORE_KEY}_{ts}.json"

    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
