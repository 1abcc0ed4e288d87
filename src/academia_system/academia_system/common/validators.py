from __future__ import annotations

from numbers import Real

from ..core.constants import MAX_MARKS, MIN_MARKS
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import InvalidMarksError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_marks_in_range(value) -> float | int:
    # bool is a Real subclass
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidMarksError("Marks must be a number")
    if value != value or not (MIN_MARKS <= value <= MAX_MARKS):  # NaN compares unequal to itself
        raise InvalidMarksError(f"Please enter a valid mark between {MIN_MARKS} and {MAX_MARKS}.")
    return value


def require_attendance_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Attendance status must be one of: {allowed}")


def require_role(value) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ValidationError("Unknown role")


def stored_text(data, key: str) -> str:
    """Read a string field from a persisted record; TypeError when it is not one."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def stored_list(data, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return value
