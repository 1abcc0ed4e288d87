from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ..common.validators import stored_list, stored_text
from ..core.enums import Role
from ..core.exceptions import RoleMismatchError
from ..students.model import Student


@dataclass(frozen=True)
class Admin:
    """Domain entity: Admin account. No fields beyond the base identity."""

    id: str
    name: str
    email: str

    @property
    def role(self) -> Role:
        return Role.ADMIN

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Admin":
        return cls(id=stored_text(data, "id"), name=stored_text(data, "name"), email=stored_text(data, "email"))


@dataclass(frozen=True)
class Teacher:
    """Thực thể miền (domain): Giáo viên."""

    id: str
    name: str
    email: str
    teacher_id: str
    department: str
    classes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def role(self) -> Role:
        return Role.TEACHER

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "teacherId": self.teacher_id,
            "department": self.department,
            "classes": list(self.classes),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Teacher":
        classes = stored_list(data, "classes")
        if not all(isinstance(c, str) for c in classes):
            raise TypeError("classes must be strings")
        return cls(
            id=stored_text(data, "id"),
            name=stored_text(data, "name"),
            email=stored_text(data, "email"),
            teacher_id=stored_text(data, "teacherId"),
            department=stored_text(data, "department"),
            classes=tuple(dict.fromkeys(classes)),
        )


AppUser = Union[Admin, Teacher, Student]

_BY_ROLE = {
    Role.ADMIN: Admin,
    Role.TEACHER: Teacher,
    Role.STUDENT: Student,
}


def user_from_dict(data: Mapping[str, Any]) -> AppUser:
    """Build the right entity from its `role` tag."""
    role = Role(data["role"])
    return _BY_ROLE[role].from_dict(data)


def as_teacher(user: AppUser | None) -> Teacher:
    if not isinstance(user, Teacher):
        raise RoleMismatchError("Current account is not a teacher")
    return user


def as_student(user: AppUser | None) -> Student:
    if not isinstance(user, Student):
        raise RoleMismatchError("Current account is not a student")
    return user
