from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import g, jsonify, request

from ..core.exceptions import AuthenticationError, AuthorizationError
from .tokens import SessionIssuer

logger = logging.getLogger(__name__)


def split_authorization(header_value: Optional[str]) -> tuple[str, Optional[str]]:
    """Split an Authorization header into (lower-cased scheme, credentials)."""
    parts = (header_value or "").split(None, 1)
    if len(parts) != 2 or not parts[1].strip():
        return (parts[0].lower() if parts else ""), None
    return parts[0].lower(), parts[1].strip()


def token_required(issuer: SessionIssuer):
    """Build a view decorator that rejects requests without a valid session.

    No credentials at all -> 401. Credentials that are not a valid bearer
    token (wrong scheme, bad signature, expired) -> 403. The wrapped view
    never runs unless verification succeeded.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            scheme, token = split_authorization(request.headers.get("Authorization"))
            if not token:
                return jsonify({"message": "Authentication token required"}), 401

            try:
                if scheme != "bearer":
                    raise AuthenticationError(f"Unsupported authorization scheme {scheme!r}")
                g.username = issuer.verify(token)
            except (AuthenticationError, AuthorizationError) as e:
                logger.info("Rejected request to %s: %s", request.path, e)
                return jsonify({"message": "Invalid or expired token"}), 403

            return view(*args, **kwargs)

        return wrapper

    return decorator
