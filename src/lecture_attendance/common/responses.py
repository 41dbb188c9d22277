from __future__ import annotations

import logging
from typing import Optional

from flask import current_app, jsonify, request

logger = logging.getLogger(__name__)


def message(text: str, status: int = 200, **extra):
    body = {"message": text}
    body.update(extra)
    return jsonify(body), status


def request_object() -> Optional[dict]:
    """The JSON body as a dict; {} when absent or unparseable, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def server_error(text: str, error: Optional[BaseException] = None):
    """500 response; the exception detail is only exposed when DEBUG is on."""
    if error is not None and bool(current_app.config.get("DEBUG", False)):
        return message(text, 500, error=str(error))
    return message(text, 500)
