from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.constants import DEMO_PASSWORD, DEMO_USERNAME
from ..core.exceptions import AuthenticationError, ConflictError, InvalidCredentialError, NotFoundError
from .model import Credential
from .repository import UserRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Use cases around login identities: verify, login, change password, provisioning."""

    def __init__(self, users: UserRepository):
        self._users = users

    def verify(self, username: str, password: str) -> bool:
        """True iff the identity exists and the password matches its hash.

        Unknown names and mismatches both give False so callers cannot tell
        which check failed.
        """
        if not username or password is None:
            return False

        user = self._users.get_by_username(username)
        if not user:
            return False

        try:
            return check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            return False

    def authenticate(self, username: str, password: str) -> Credential:
        if not self.verify(username, password):
            raise AuthenticationError("Invalid username or password")
        return self._users.get_by_username(username)

    def change_password(self, username: str, current_password: str, new_password: str) -> None:
        user = self._users.get_by_username(username)
        if not user:
            raise NotFoundError("User not found")

        if not self.verify(username, current_password):
            raise InvalidCredentialError("Current password incorrect")

        self._users.update_password_hash(
            username=username,
            password_hash=generate_password_hash(new_password),
        )
        logger.info("Password changed for user %s", username)

    def create_identity(self, username: str, password: str) -> Credential:
        username = require_non_empty(username, "Username")
        require_non_empty(password, "Password")

        self._users.create_user(username=username, password_hash=generate_password_hash(password))
        return self._users.get_by_username(username)

    def ensure_demo_identity(self) -> bool:
        """Seed the demo identity once; returns True if it was created now."""
        if self._users.get_by_username(DEMO_USERNAME):
            return False

        try:
            self._users.create_user(username=DEMO_USERNAME, password_hash=generate_password_hash(DEMO_PASSWORD))
        except ConflictError:
            # another process seeded it first
            return False
        logger.info("Demo user %s created", DEMO_USERNAME)
        return True
