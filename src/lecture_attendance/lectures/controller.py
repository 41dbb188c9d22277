from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..auth.gate import token_required
from ..common.responses import server_error
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    auth_required = token_required(container.session_issuer)

    @app.route(f"{prefix}/lectures", methods=["GET"], endpoint="list_lectures")
    @auth_required
    def list_lectures():
        try:
            lectures = container.lecture_service.list_lectures()
            return jsonify([lec.to_dict() for lec in lectures])
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Listing lectures failed")
            return server_error("Error loading lectures", e)
