from __future__ import annotations

import logging

from ..core.enums import AttendanceStatus, LoadState, Role
from ..directory.service import DirectoryService
from .store import RecordStore

logger = logging.getLogger(__name__)

DEMO_ADMIN = {"name": "Admin", "email": "admin@example.com"}

DEMO_TEACHERS = [
    {
        "name": "Mary Jones",
        "email": "mary.jones@example.com",
        "teacher_id": "T001",
        "department": "Math",
        "classes": ["10A", "10B"],
    },
    {
        "name": "Peter Brown",
        "email": "peter.brown@example.com",
        "teacher_id": "T002",
        "department": "Science",
        "classes": ["11A"],
    },
]

DEMO_STUDENTS = [
    {"name": "Alice Smith", "email": "alice@example.com", "student_id": "S100", "class_name": "10A"},
    {"name": "Bob Lee", "email": "bob@example.com", "student_id": "S101", "class_name": "10A"},
    {"name": "Chloe Tran", "email": "chloe@example.com", "student_id": "S102", "class_name": "10B"},
    {"name": "David Kim", "email": "david@example.com", "student_id": "S103", "class_name": "11A"},
]

DEMO_ATTENDANCE = [
    ("Jan", AttendanceStatus.PRESENT),
    ("Feb", AttendanceStatus.PRESENT),
    ("Mar", AttendanceStatus.LATE),
]

DEMO_MARKS = [
    ("Jan", "Math", 85),
    ("Feb", "Math", 78),
    ("Jan", "Science", 91),
]


def ensure_store(store: RecordStore) -> LoadState:
    """Create an empty store when none is persisted (or the old one is unreadable).

    Returns the state found before initialization.
    """
    state, _ = store.inspect()
    if state != LoadState.VALID:
        store.load()
    return state


async def seed_demo(directory: DirectoryService) -> int:
    """Create demo accounts whose email is not registered yet.

    Idempotent; returns how many accounts were created.
    """
    created = 0

    if not await directory.login(DEMO_ADMIN["email"], Role.ADMIN):
        await directory.signup_admin(DEMO_ADMIN["name"], DEMO_ADMIN["email"])
        created += 1

    for t in DEMO_TEACHERS:
        if not await directory.login(t["email"], Role.TEACHER):
            await directory.add_teacher(**t)
            created += 1

    for s in DEMO_STUDENTS:
        if await directory.login(s["email"], Role.STUDENT):
            continue
        student = await directory.add_student(**s)
        for month, status in DEMO_ATTENDANCE:
            await directory.update_student_attendance(student.id, month, status)
        for month, subject, marks in DEMO_MARKS:
            await directory.update_student_marks(student.id, month, subject, marks)
        created += 1

    logger.info("demo seed created %d accounts", created)
    return created
