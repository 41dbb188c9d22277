from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from ..auth.gate import token_required
from ..common.responses import message, server_error
from ..container import Container
from ..core.exceptions import ConflictError, StorageUnavailableError, ValidationError
from .photo_store import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container, *, prefix: str = "", upload_folder: str) -> None:
    auth_required = token_required(container.session_issuer)

    @app.route(f"{prefix}/students", methods=["POST"], endpoint="register_student")
    @auth_required
    def register_student():
        try:
            student = container.roster_service.register_student(
                request.form.get("rollNo", ""),
                request.form.get("name", ""),
                request.files.getlist("photos"),
            )
            return jsonify({"message": "Student registered", "student": student.to_dict()})
        except (ValidationError, ConflictError) as e:
            return message(str(e), 400)
        except StorageUnavailableError as e:
            return server_error("Error registering student", e)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Student registration failed")
            return server_error("Error registering student", e)

    @app.route(f"{prefix}/students", methods=["GET"], endpoint="list_students")
    @auth_required
    def list_students():
        try:
            students = container.roster_service.list_students()
            return jsonify([s.to_dict() for s in students])
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Listing students failed")
            return server_error("Error loading students", e)

    @app.route(f"{UPLOADS_URL_PREFIX}/<path:filename>", methods=["GET"], endpoint="uploads")
    def uploads(filename: str):
        return send_from_directory(upload_folder, filename)
