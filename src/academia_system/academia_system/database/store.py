from __future__ import annotations

import json
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Tuple

from ..core.constants import STORE_KEY
from ..core.enums import LoadState, Role
from ..core.exceptions import StoreCorruptError
from ..students.model import Student
from ..users.model import Admin, AppUser, Teacher, user_from_dict
from .connection import KeyValueStorage

logger = logging.getLogger(__name__)

COLLECTIONS = (
    ("students", Role.STUDENT),
    ("teachers", Role.TEACHER),
    ("admins", Role.ADMIN),
)


@dataclass
class StoreDocument:
    """The whole persisted state: three collections, insertion order kept."""

    students: list[Student] = field(default_factory=list)
    teachers: list[Teacher] = field(default_factory=list)
    admins: list[Admin] = field(default_factory=list)

    def all_users(self) -> list[AppUser]:
        return [*self.admins, *self.teachers, *self.students]

    def all_ids(self) -> set[str]:
        return {u.id for u in self.all_users()}

    def email_taken(self, email: str) -> bool:
        return any(u.email == email for u in self.all_users())

    def to_dict(self) -> dict:
        return {
            "students": [s.to_dict() for s in self.students],
            "teachers": [t.to_dict() for t in self.teachers],
            "admins": [a.to_dict() for a in self.admins],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "StoreDocument":
        """Strict structural parse; raises StoreCorruptError on any mismatch."""
        if not isinstance(data, dict):
            raise StoreCorruptError("store document is not an object")

        parsed: dict[str, list] = {}
        for name, role in COLLECTIONS:
            if name not in data:
                raise StoreCorruptError(f"missing collection {name!r}")
            items = data[name]
            if not isinstance(items, list):
                raise StoreCorruptError(f"collection {name!r} is not a list")
            out = []
            for i, item in enumerate(items):
                if not isinstance(item, dict):
                    raise StoreCorruptError(f"{name}[{i}] is not an object")
                try:
                    user = user_from_dict(item)
                except (KeyError, TypeError, ValueError) as e:
                    raise StoreCorruptError(f"{name}[{i}] is malformed: {e}") from e
                if user.role != role:
                    raise StoreCorruptError(f"{name}[{i}] has role {user.role.value}")
                out.append(user)
            parsed[name] = out

        document = cls(**parsed)
        document._check_unique()
        return document

    def _check_unique(self) -> None:
        users = self.all_users()
        for label, values in (
            ("id", [u.id for u in users]),
            ("email", [u.email for u in users]),
            ("studentId", [s.student_id for s in self.students]),
            ("teacherId", [t.teacher_id for t in self.teachers]),
        ):
            if len(set(values)) != len(values):
                raise StoreCorruptError(f"duplicate {label} in store")


class RecordStore:
    """Durable holder of the three collections behind a single key.

    `load()` never raises: an absent or corrupt payload degrades to an empty,
    freshly persisted document. Mutations go through `transaction()` which holds
    a process-wide lock for the whole load -> mutate -> save sequence.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = STORE_KEY):
        self._storage = storage
        self._key = key
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    def inspect(self) -> Tuple[LoadState, Optional[StoreDocument]]:
        try:
            raw = self._storage.get_item(self._key)
        except UnicodeDecodeError:
            logger.warning("store %r is not valid UTF-8", self._key)
            return LoadState.CORRUPT, None
        if raw is None:
            return LoadState.ABSENT, None

        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("store %r is not valid JSON", self._key)
            return LoadState.CORRUPT, None

        try:
            return LoadState.VALID, StoreDocument.from_dict(payload)
        except StoreCorruptError as e:
            logger.warning("store %r failed validation: %s", self._key, e)
            return LoadState.CORRUPT, None

    def load(self) -> StoreDocument:
        with self._lock:
            state, document = self.inspect()
            if state == LoadState.VALID and document is not None:
                return document

            if state == LoadState.CORRUPT:
                logger.warning("resetting store %r to an empty document", self._key)
            return self.reset()

    def save(self, document: StoreDocument) -> None:
        with self._lock:
            self._storage.set_item(self._key, json.dumps(document.to_dict()))

    def reset(self) -> StoreDocument:
        document = StoreDocument()
        self.save(document)
        return document

    @contextmanager
    def transaction(self) -> Iterator[StoreDocument]:
        """Yield the current document; persist it only if the block completes."""
        with self._lock:
            document = self.load()
            yield document
            self.save(document)
