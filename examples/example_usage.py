"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở directory service.
"""

import asyncio
import importlib

from config import get_settings_module

from src.academia_system.academia_system.container import build_container


async def run():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config={"data_dir": settings.DATA_DIR, "store_key": settings.STORE_KEY})

    for student in await container.directory.get_students_by_class("10A"):
        print(student.name, container.dashboard_service.student_summary(student))


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
