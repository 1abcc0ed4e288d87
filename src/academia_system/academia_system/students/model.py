from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..common.validators import stored_list, stored_text
from ..core.constants import MAX_MARKS, MIN_MARKS
from ..core.enums import AttendanceStatus, Role


@dataclass(frozen=True)
class AttendanceRecord:
    """Bản ghi điểm danh theo tháng; `month` là khoá trong một học sinh."""

    month: str
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {"month": self.month, "status": self.status.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(month=stored_text(data, "month"), status=AttendanceStatus(stored_text(data, "status")))


@dataclass(frozen=True)
class MarkRecord:
    """Marks for one subject in one month; (month, subject) is the key."""

    month: str
    subject: str
    marks: float

    def to_dict(self) -> dict:
        return {"month": self.month, "subject": self.subject, "marks": self.marks}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MarkRecord":
        marks = data["marks"]
        if isinstance(marks, bool) or not isinstance(marks, (int, float)):
            raise TypeError(f"marks must be numeric, got {type(marks).__name__}")
        if marks != marks or not (MIN_MARKS <= marks <= MAX_MARKS):
            raise ValueError(f"marks {marks!r} outside {MIN_MARKS}-{MAX_MARKS}")
        return cls(month=stored_text(data, "month"), subject=stored_text(data, "subject"), marks=marks)


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học sinh.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập lưu trữ).
    """

    id: str
    name: str
    email: str
    student_id: str
    class_name: str
    attendance: tuple[AttendanceRecord, ...] = field(default_factory=tuple)
    marks: tuple[MarkRecord, ...] = field(default_factory=tuple)

    @property
    def role(self) -> Role:
        return Role.STUDENT

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "studentId": self.student_id,
            "class": self.class_name,
            "attendance": [a.to_dict() for a in self.attendance],
            "marks": [m.to_dict() for m in self.marks],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        attendance = tuple(AttendanceRecord.from_dict(a) for a in stored_list(data, "attendance"))
        marks = tuple(MarkRecord.from_dict(m) for m in stored_list(data, "marks"))

        # At most one record per month, and per (month, subject) for marks.
        if len({a.month for a in attendance}) != len(attendance):
            raise ValueError("duplicate attendance month")
        if len({(m.month, m.subject) for m in marks}) != len(marks):
            raise ValueError("duplicate marks for month and subject")

        return cls(
            id=stored_text(data, "id"),
            name=stored_text(data, "name"),
            email=stored_text(data, "email"),
            student_id=stored_text(data, "studentId"),
            class_name=stored_text(data, "class"),
            attendance=attendance,
            marks=marks,
        )
