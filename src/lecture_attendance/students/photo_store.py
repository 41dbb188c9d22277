from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Protocol

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

STUDENT_PHOTO_DIR = "students"
UPLOADS_URL_PREFIX = "/uploads"


class PhotoStore(Protocol):
    """Accepts raw photo uploads and hands back stable reference strings."""

    def save(self, upload: FileStorage) -> str:
        raise NotImplementedError

    def delete(self, reference: str) -> None:
        raise NotImplementedError


class LocalPhotoStore(PhotoStore):
    """Stores photos under <root>/students and references them as /uploads/students/<file>.

    File names are timestamped (plus a short random suffix so two uploads in
    the same millisecond do not collide); contents are never inspected.
    """

    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _directory(self) -> Path:
        directory = self._root / STUDENT_PHOTO_DIR
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def save(self, upload: FileStorage) -> str:
        ext = Path(secure_filename(upload.filename or "")).suffix.lower()
        filename = f"photos-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"
        upload.save(self._directory() / filename)
        return f"{UPLOADS_URL_PREFIX}/{STUDENT_PHOTO_DIR}/{filename}"

    def delete(self, reference: str) -> None:
        prefix = f"{UPLOADS_URL_PREFIX}/{STUDENT_PHOTO_DIR}/"
        if not reference.startswith(prefix):
            return
        name = secure_filename(reference[len(prefix):])
        if not name:
            return
        try:
            (self._root / STUDENT_PHOTO_DIR / name).unlink()
        except FileNotFoundError:
            pass
        except OSError:
            logger.exception("Could not remove photo %s", reference)
