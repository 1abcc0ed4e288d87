from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import error, json_body, required, roles_required
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container
from ..users.model import as_teacher


def register(app: Flask, container: Container) -> None:
    directory = container.directory

    async def _outside_teacher_classes(student_id: str):
        """Teachers only record attendance and marks for their own classes."""
        if session.get("role") != Role.TEACHER.value:
            return None

        teacher = as_teacher(await container.auth_service.current_user(session.get("user_id"), session.get("role")))
        student = await directory.get_student_by_id(student_id)
        if student and student.class_name not in teacher.classes:
            return error("You can only update students in your own classes.", 403)
        return None

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @roles_required(Role.ADMIN, Role.TEACHER)
    async def list_students():
        students = await directory.list_students()
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @roles_required(Role.ADMIN)
    async def add_student():
        data = json_body()
        student = await directory.add_student(
            name=required(data, "name", "Name"),
            email=required(data, "email", "Email"),
            student_id=required(data, "studentId", "Student ID"),
            class_name=required(data, "class", "Class"),
        )
        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    @roles_required(Role.ADMIN, Role.TEACHER, Role.STUDENT)
    async def get_student(student_id: str):
        # Students may only look at their own record.
        if session.get("role") == Role.STUDENT.value and session.get("user_id") != student_id:
            return error("You do not have permission for this action.", 403)

        student = await directory.get_student_by_id(student_id)
        if not student:
            return error("Student not found", 404)
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @roles_required(Role.ADMIN)
    async def delete_student(student_id: str):
        if not await directory.delete_student(student_id):
            return error("Student not found", 404)
        return jsonify({"ok": True})

    @app.route("/api/classes/<class_name>/students", methods=["GET"], endpoint="class_students")
    @roles_required(Role.ADMIN, Role.TEACHER)
    async def class_students(class_name: str):
        students = await directory.get_students_by_class(class_name)
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students/<student_id>/attendance", methods=["PUT"], endpoint="update_attendance")
    @roles_required(Role.ADMIN, Role.TEACHER)
    async def update_attendance(student_id: str):
        denied = await _outside_teacher_classes(student_id)
        if denied:
            return denied

        data = json_body()
        ok = await directory.update_student_attendance(
            student_id,
            required(data, "month", "Month"),
            data.get("status", ""),
        )
        if not ok:
            return error("Student not found", 404)
        return jsonify({"ok": True})

    @app.route("/api/students/<student_id>/marks", methods=["PUT"], endpoint="update_marks")
    @roles_required(Role.ADMIN, Role.TEACHER)
    async def update_marks(student_id: str):
        denied = await _outside_teacher_classes(student_id)
        if denied:
            return denied

        data = json_body()
        ok = await directory.update_student_marks(
            student_id,
            required(data, "month", "Month"),
            required(data, "subject", "Subject"),
            _parse_marks(data.get("marks")),
        )
        if not ok:
            return error("Student not found", 404)
        return jsonify({"ok": True})


def _parse_marks(value):
    """Accept numbers, or numeric strings as sent by plain HTML forms."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError("Marks are required")
        try:
            number = float(value)
        except ValueError:
            raise ValidationError("Marks must be a number")
        return int(number) if number.is_integer() else number
    return value
