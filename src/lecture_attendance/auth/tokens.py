from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_ALGORITHM
from ..core.exceptions import AuthenticationError, TokenExpiredError

logger = logging.getLogger(__name__)


class SessionIssuer:
    """Issues and verifies signed, time-limited bearer tokens.

    Tokens carry the username plus iat/exp claims. Verification does not look
    the identity up again: a token stays valid until it expires even if the
    password changes in the meantime.
    """

    def __init__(self, secret: str, *, ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS)):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, username: str, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        # pyjwt returns str in v2+
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: Optional[str]) -> str:
        """Return the username in a valid token.

        Raises AuthenticationError for missing, malformed or badly signed
        tokens and TokenExpiredError once the token's lifetime is over.
        """
        if not token:
            raise AuthenticationError("Authentication token required")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise AuthenticationError("Invalid token") from e

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise AuthenticationError("Invalid token")
        return username
