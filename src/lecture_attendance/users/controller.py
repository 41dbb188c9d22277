from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..auth.gate import token_required
from ..common.responses import message, request_object, server_error
from ..container import Container
from ..core.exceptions import (
    AuthenticationError,
    InvalidCredentialError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    auth_required = token_required(container.session_issuer)

    @app.route(f"{prefix}/login", methods=["POST"], endpoint="login")
    def login():
        data = request_object()
        if data is None:
            return message("Invalid request body", 400)
        username = data.get("username") or ""
        password = data.get("password") or ""

        try:
            user = container.identity_service.authenticate(str(username), str(password))
            token = container.session_issuer.issue(user.username)
            return jsonify({"token": token})
        except AuthenticationError as e:
            return message(str(e), 400)
        except StorageUnavailableError as e:
            return server_error("Login failed", e)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Login failed")
            return server_error("Login failed", e)

    @app.route(f"{prefix}/change-password", methods=["POST"], endpoint="change_password")
    @auth_required
    def change_password():
        data = request_object()
        if data is None:
            return message("Invalid request body", 400)
        current_password = data.get("currentPassword") or ""
        new_password = data.get("newPassword")

        if not isinstance(new_password, str) or not new_password:
            return message("newPassword is required", 400)

        try:
            container.identity_service.change_password(g.username, str(current_password), new_password)
            return message("Password changed successfully")
        except NotFoundError as e:
            return message(str(e), 404)
        except (InvalidCredentialError, ValidationError) as e:
            return message(str(e), 400)
        except StorageUnavailableError as e:
            return server_error("Error changing password", e)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Password change failed")
            return server_error("Error changing password", e)
