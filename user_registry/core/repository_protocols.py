"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Storage is accessed only through the UserRepository Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the only implementation is in-memory, no IO to await
"""

from typing import Protocol

from user_registry.core.user import User, UserPatch


class UserRepository(Protocol):
    """Contract for user storage, implemented by shell."""
    def find_all(self) -> list[User]: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def exists_by_id(self, user_id: int) -> bool: ...
    def save(self, user: User) -> User: ...
    def delete_by_email(self, email: str) -> bool: ...
    def update(self, user_id: int, patch: UserPatch) -> User: ...
    def count(self) -> int: ...
