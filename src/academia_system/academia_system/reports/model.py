from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentSummary:
    """Read-model for the student dashboard cards."""

    present: int
    total: int
    percentage: float
    average_marks: float
    class_name: str


@dataclass(frozen=True)
class TeacherHome:
    classes: list[str]
    department: str
    total_students: int


@dataclass(frozen=True)
class ClassPerformance:
    name: str
    students: int
    attendance: float


@dataclass(frozen=True)
class AdminOverview:
    total_students: int
    total_teachers: int
    total_classes: int
    overall_attendance: float
    classes: list[ClassPerformance]
