from __future__ import annotations

import uuid
from typing import Container

from ..core.constants import ID_PREFIXES
from ..core.enums import Role


def new_id(role: Role, taken: Container[str]) -> str:
    """Generate an account id with the role prefix that is not in `taken`."""
    prefix = ID_PREFIXES[role.value]
    while True:
        candidate = f"{prefix}{uuid.uuid4().hex[:12]}"
        if candidate not in taken:
            return candidate
