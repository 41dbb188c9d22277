from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..auth.gate import token_required
from ..common.responses import message, request_object, server_error
from ..container import Container
from ..core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    auth_required = token_required(container.session_issuer)

    @app.route(f"{prefix}/attendance/<lecture_id>", methods=["GET"], endpoint="get_attendance")
    @auth_required
    def get_attendance(lecture_id: str):
        try:
            view = container.attendance_service.query(lecture_id, request.args.get("date"))
            return jsonify(view.to_dict())
        except ValidationError as e:
            return message(str(e), 400)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Loading attendance failed")
            return server_error("Error loading attendance", e)

    @app.route(f"{prefix}/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    @auth_required
    def mark_attendance():
        data = request_object()
        if data is None:
            return message("Invalid request body", 400)
        lecture_id = data.get("lectureId")
        student_id = data.get("studentId")
        if lecture_id in (None, "") or student_id in (None, ""):
            return message("lectureId and studentId required", 400)

        try:
            record = container.attendance_service.mark_present(lecture_id, student_id, data.get("date"))
            return jsonify({"message": "Attendance marked", "attendance": record.to_dict()})
        except (ValidationError, ConflictError) as e:
            return message(str(e), 400)
        except NotFoundError as e:
            return message(str(e), 404)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Marking attendance failed")
            return server_error("Error marking attendance", e)
