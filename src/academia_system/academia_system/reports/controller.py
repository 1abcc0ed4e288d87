from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, session

from ..common.web import error, login_required
from ..core.enums import Role
from ..container import Container
from ..users.model import as_student, as_teacher


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    async def dashboard():
        user = await container.auth_service.current_user(session.get("user_id"), session.get("role"))
        if not user:
            session.clear()
            return error("Session is no longer valid.", 401)

        reports = container.dashboard_service

        if user.role == Role.ADMIN:
            overview = await reports.admin_overview()
            return jsonify({"role": user.role.value, "overview": asdict(overview)})

        if user.role == Role.TEACHER:
            teacher = as_teacher(user)
            home = await reports.teacher_home(teacher)
            return jsonify({"role": user.role.value, "teacher": teacher.to_dict(), "home": asdict(home)})

        student = as_student(user)
        return jsonify(
            {
                "role": user.role.value,
                "student": student.to_dict(),
                "summary": asdict(reports.student_summary(student)),
                "marks_series": reports.marks_series(student),
            }
        )
