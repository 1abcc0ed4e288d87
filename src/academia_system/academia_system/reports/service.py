from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from ..directory.service import DirectoryService
from ..students.model import AttendanceRecord, Student
from ..users.model import Teacher
from .model import AdminOverview, ClassPerformance, StudentSummary, TeacherHome


def attendance_percentage(records: Iterable[AttendanceRecord]) -> tuple[int, int, float]:
    """(present, total, percentage) where only `Present` counts as attended."""
    records = list(records)
    total = len(records)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    percentage = round(present / total * 100, 1) if total else 0.0
    return present, total, percentage


class DashboardService:
    """Builds the numbers shown on the three role dashboards."""

    def __init__(self, directory: DirectoryService):
        self._directory = directory

    def student_summary(self, student: Student) -> StudentSummary:
        present, total, percentage = attendance_percentage(student.attendance)

        if student.marks:
            average = round(sum(m.marks for m in student.marks) / len(student.marks), 1)
        else:
            average = 0.0

        return StudentSummary(
            present=present,
            total=total,
            percentage=percentage,
            average_marks=average,
            class_name=student.class_name,
        )

    def marks_series(self, student: Student) -> list[dict]:
        """One row per month (first-seen order) with a column per subject, for charts."""
        rows: dict[str, dict] = {}
        for m in student.marks:
            row = rows.setdefault(m.month, {"month": m.month})
            row[m.subject] = m.marks
        return list(rows.values())

    async def teacher_home(self, teacher: Teacher) -> TeacherHome:
        total = 0
        for class_name in teacher.classes:
            total += len(await self._directory.get_students_by_class(class_name))

        return TeacherHome(classes=list(teacher.classes), department=teacher.department, total_students=total)

    async def admin_overview(self) -> AdminOverview:
        students = await self._directory.list_students()
        teachers = await self._directory.list_teachers()

        by_class: dict[str, list[Student]] = {}
        for s in students:
            by_class.setdefault(s.class_name, []).append(s)

        classes = []
        for name in sorted(by_class):
            members = by_class[name]
            _, _, pct = attendance_percentage(r for s in members for r in s.attendance)
            classes.append(ClassPerformance(name=name, students=len(members), attendance=pct))

        _, _, overall = attendance_percentage(r for s in students for r in s.attendance)

        return AdminOverview(
            total_students=len(students),
            total_teachers=len(teachers),
            total_classes=len(by_class),
            overall_attendance=overall,
            classes=classes,
        )
