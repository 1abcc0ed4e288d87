from __future__ import annotations

from functools import wraps
from typing import Any

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DuplicateError, ValidationError


def error(message: str, status: int):
    return jsonify({"error": message}), status


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def required(data: dict, key: str, label: str) -> str:
    return require_non_empty(data.get(key, ""), label)


def login_required(view):
    @wraps(view)
    async def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error("Please sign in to continue.", 401)
        return await view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Allow only sessions whose role is one of `roles`."""
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        async def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return error("Please sign in to continue.", 401)
            if session.get("role") not in allowed:
                return error("You do not have permission for this action.", 403)
            return await view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DuplicateError)
    def _duplicate(e: DuplicateError):
        return error(str(e), 409)

    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return error(str(e), 403)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        app.logger.exception("unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error(f"Internal error: {e}", 500)
        return error("Internal error", 500)
