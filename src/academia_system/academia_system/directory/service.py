from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Iterable, Optional, Sequence

from ..common.ids import new_id
from ..common.validators import require_attendance_status, require_marks_in_range, require_role
from ..core.constants import DEFAULT_LATENCY_SECONDS
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import DuplicateEmailError, DuplicateStudentIdError, DuplicateTeacherIdError
from ..database.store import RecordStore, StoreDocument
from ..students.model import AttendanceRecord, MarkRecord, Student
from ..users.model import Admin, AppUser, Teacher

logger = logging.getLogger(__name__)


class DirectoryService:
    """The only reader/writer of the record store.

    Every operation is a coroutine; the configured latency is awaited before the
    store is touched. Not-found outcomes are `None`/`False`, only uniqueness and
    input validation raise.
    """

    def __init__(self, store: RecordStore, *, latency_seconds: float = DEFAULT_LATENCY_SECONDS):
        self._store = store
        self._latency = float(latency_seconds)

    async def _pause(self) -> None:
        await asyncio.sleep(self._latency)

    # --- accounts -------------------------------------------------------

    async def signup_admin(self, name: str, email: str) -> Admin:
        await self._pause()
        with self._store.transaction() as db:
            if db.email_taken(email):
                raise DuplicateEmailError()
            admin = Admin(id=new_id(Role.ADMIN, db.all_ids()), name=name, email=email)
            db.admins.append(admin)

        logger.info("admin %s signed up", admin.id)
        return admin

    async def login(self, email: str, role: Role | str) -> Optional[AppUser]:
        await self._pause()
        db = self._store.load()
        role = require_role(role)
        return next((u for u in _pool(db, role) if u.email == email), None)

    async def get_user(self, user_id: str, role: Role | str) -> Optional[AppUser]:
        await self._pause()
        db = self._store.load()
        role = require_role(role)
        return next((u for u in _pool(db, role) if u.id == user_id), None)

    # --- students -------------------------------------------------------

    async def list_students(self) -> list[Student]:
        await self._pause()
        return list(self._store.load().students)

    async def get_student_by_id(self, student_id: str) -> Optional[Student]:
        await self._pause()
        return next((s for s in self._store.load().students if s.id == student_id), None)

    async def get_students_by_class(self, class_name: str) -> list[Student]:
        await self._pause()
        return [s for s in self._store.load().students if s.class_name == class_name]

    async def add_student(self, *, name: str, email: str, student_id: str, class_name: str) -> Student:
        await self._pause()
        with self._store.transaction() as db:
            if db.email_taken(email):
                raise DuplicateEmailError("Student with this email already exists.")
            if any(s.student_id == student_id for s in db.students):
                raise DuplicateStudentIdError()

            student = Student(
                id=new_id(Role.STUDENT, db.all_ids()),
                name=name,
                email=email,
                student_id=student_id,
                class_name=class_name,
            )
            db.students.append(student)

        logger.info("student %s (%s) added to class %s", student.id, student.student_id, student.class_name)
        return student

    async def delete_student(self, id: str) -> bool:
        await self._pause()
        with self._store.transaction() as db:
            before = len(db.students)
            db.students[:] = [s for s in db.students if s.id != id]
            return len(db.students) < before

    # --- teachers -------------------------------------------------------

    async def list_teachers(self) -> list[Teacher]:
        await self._pause()
        return list(self._store.load().teachers)

    async def add_teacher(
        self,
        *,
        name: str,
        email: str,
        teacher_id: str,
        department: str,
        classes: Iterable[str] = (),
    ) -> Teacher:
        await self._pause()
        with self._store.transaction() as db:
            if db.email_taken(email):
                raise DuplicateEmailError("Teacher with this email already exists.")
            if any(t.teacher_id == teacher_id for t in db.teachers):
                raise DuplicateTeacherIdError()

            teacher = Teacher(
                id=new_id(Role.TEACHER, db.all_ids()),
                name=name,
                email=email,
                teacher_id=teacher_id,
                department=department,
                classes=tuple(dict.fromkeys(classes)),
            )
            db.teachers.append(teacher)

        logger.info("teacher %s (%s) added", teacher.id, teacher.teacher_id)
        return teacher

    async def delete_teacher(self, id: str) -> bool:
        await self._pause()
        with self._store.transaction() as db:
            before = len(db.teachers)
            db.teachers[:] = [t for t in db.teachers if t.id != id]
            return len(db.teachers) < before

    # --- attendance / marks --------------------------------------------

    async def update_student_attendance(self, student_id: str, month: str, status: AttendanceStatus | str) -> bool:
        status = require_attendance_status(status)
        await self._pause()
        with self._store.transaction() as db:
            idx = _index_of(db, student_id)
            if idx is None:
                return False

            student = db.students[idx]
            db.students[idx] = dataclasses.replace(
                student,
                attendance=_upsert(
                    student.attendance,
                    AttendanceRecord(month=month, status=status),
                    key=lambda r: r.month,
                ),
            )
            return True

    async def update_student_marks(self, student_id: str, month: str, subject: str, marks: float) -> bool:
        marks = require_marks_in_range(marks)
        await self._pause()
        with self._store.transaction() as db:
            idx = _index_of(db, student_id)
            if idx is None:
                return False

            student = db.students[idx]
            db.students[idx] = dataclasses.replace(
                student,
                marks=_upsert(
                    student.marks,
                    MarkRecord(month=month, subject=subject, marks=marks),
                    key=lambda r: (r.month, r.subject),
                ),
            )
            return True


def _pool(db: StoreDocument, role: Role) -> Sequence[AppUser]:
    return {
        Role.ADMIN: db.admins,
        Role.TEACHER: db.teachers,
        Role.STUDENT: db.students,
    }[role]


def _index_of(db: StoreDocument, student_id: str) -> Optional[int]:
    for i, s in enumerate(db.students):
        if s.id == student_id:
            return i
    return None


def _upsert(records: tuple, new, *, key) -> tuple:
    """Replace the record sharing `new`'s key in place, or append it."""
    k = key(new)
    out = list(records)
    for i, r in enumerate(out):
        if key(r) == k:
            out[i] = new
            return tuple(out)
    out.append(new)
    return tuple(out)
