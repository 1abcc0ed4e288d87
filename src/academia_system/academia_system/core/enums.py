from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Vai trò tài khoản; quyết định tài khoản nằm trong collection nào."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh theo tháng lưu trong tài liệu."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class LoadState(str, Enum):
    """Kết quả đọc tài liệu lưu trữ (không có / hỏng / hợp lệ)."""

    ABSENT = "ABSENT"
    CORRUPT = "CORRUPT"
    VALID = "VALID"
