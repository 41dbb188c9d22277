from __future__ import annotations

from typing import Optional, Protocol

from .model import Credential


class UserRepository(Protocol):
    """Repository interface for credentials.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[Credential]:
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str) -> int:
        """Insert a credential; raises ConflictError if the username is taken."""
        raise NotImplementedError

    def update_password_hash(self, *, username: str, password_hash: str) -> bool:
        raise NotImplementedError
