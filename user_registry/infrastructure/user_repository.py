"""In-Memory User Repository: process-wide user storage behind a single lock.

Invariants:
    - Records kept in insertion order; no secondary indexes
    - Every public operation holds _lock, so writes are atomic and reads never torn
    - find_all returns a shallow copy; mutating the list never touches storage
    - save assigns the next id when user.id is None; explicit ids advance the counter

Design Decisions:
    - RLock over Lock: update() reuses find_by_id() under the same guard
    - State lost on restart (single-process uvicorn, no persistence layer)
"""

import logging
import threading

from user_registry.core.domain_types import UserId
from user_registry.core.errors import UserNotFoundError
from user_registry.core.user import User, UserPatch, apply_patch

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """List-backed implementation of the UserRepository protocol."""

    def __init__(self):
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.RLock()

    def find_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            return next((u for u in self._users if u.id == user_id), None)

    def exists_by_id(self, user_id: int) -> bool:
        return self.find_by_id(user_id) is not None

    def save(self, user: User) -> User:
        with self._lock:
            if user.id is None:
                user.id = self._next_id()
            else:
                self._last_id = max(self._last_id, user.id)
            self._users.append(user)
            logger.debug("User stored", extra={"user_id": user.id})
            return user

    def delete_by_email(self, email: str) -> bool:
        with self._lock:
            kept = [u for u in self._users if u.email != email]
            removed = len(self._users) - len(kept)
            self._users[:] = kept
            return removed > 0

    def update(self, user_id: int, patch: UserPatch) -> User:
        with self._lock:
            existing = self.find_by_id(user_id)
            if existing is None:
                raise UserNotFoundError(user_id)
            return apply_patch(existing, patch)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _next_id(self) -> UserId:
        self._last_id += 1
        return UserId(self._last_id)
