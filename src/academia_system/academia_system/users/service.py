from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_non_empty, require_role
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..directory.service import DirectoryService
from .model import Admin, AppUser


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    name: str
    email: str
    role: Role

    @classmethod
    def from_user(cls, user: AppUser) -> "SessionUser":
        return cls(user_id=user.id, name=user.name, email=user.email, role=user.role)


class AuthService:
    """Use case: email + role login and admin signup.

    There is no password: login is a lookup, an unknown email/role pair is the
    only failure.
    """

    def __init__(self, directory: DirectoryService):
        self._directory = directory

    async def login(self, email: str, role: Role | str) -> tuple[SessionUser, AppUser]:
        """Return the session identity together with the account it was built from."""
        email = require_non_empty(email, "Email")
        role = require_role(role)

        user = await self._directory.login(email, role)
        if not user:
            raise AuthenticationError("Invalid credentials or role.")
        return SessionUser.from_user(user), user

    async def signup_admin(self, name: str, email: str) -> Admin:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        return await self._directory.signup_admin(name, email)

    async def current_user(self, user_id: Optional[str], role: Optional[str]) -> Optional[AppUser]:
        """Reload the account behind a session; None when it no longer exists."""
        if not user_id or role not in {r.value for r in Role}:
            return None
        return await self._directory.get_user(user_id, role)
