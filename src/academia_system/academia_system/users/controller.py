from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import error, json_body, login_required, required, roles_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    async def login():
        data = json_body()
        s_user, user = await container.auth_service.login(data.get("email", ""), data.get("role", ""))

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        return jsonify(user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    async def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    async def signup():
        data = json_body()
        admin = await container.auth_service.signup_admin(data.get("name", ""), data.get("email", ""))
        return jsonify(admin.to_dict()), 201

    @app.route("/api/auth/me", endpoint="me")
    @login_required
    async def me():
        user = await container.auth_service.current_user(session.get("user_id"), session.get("role"))
        if not user:
            session.clear()
            return error("Session is no longer valid.", 401)
        return jsonify(user.to_dict())

    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    @roles_required(Role.ADMIN)
    async def list_teachers():
        teachers = await container.directory.list_teachers()
        return jsonify([t.to_dict() for t in teachers])

    @app.route("/api/teachers", methods=["POST"], endpoint="add_teacher")
    @roles_required(Role.ADMIN)
    async def add_teacher():
        data = json_body()
        classes = data.get("classes") or []
        if isinstance(classes, str):
            classes = [c.strip() for c in classes.split(",") if c.strip()]

        teacher = await container.directory.add_teacher(
            name=required(data, "name", "Name"),
            email=required(data, "email", "Email"),
            teacher_id=required(data, "teacherId", "Teacher ID"),
            department=required(data, "department", "Department"),
            classes=[str(c) for c in classes],
        )
        return jsonify(teacher.to_dict()), 201

    @app.route("/api/teachers/<teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @roles_required(Role.ADMIN)
    async def delete_teacher(teacher_id: str):
        if not await container.directory.delete_teacher(teacher_id):
            return error("Teacher not found", 404)
        return jsonify({"ok": True})
