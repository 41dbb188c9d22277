from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..core.constants import REQUIRED_PHOTO_COUNT
from ..core.exceptions import ConflictError, ValidationError
from .model import Student
from .photo_store import PhotoStore
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: register and list students."""

    def __init__(self, students: StudentRepository, photos: PhotoStore):
        self._students = students
        self._photos = photos

    def register_student(self, roll_no: str, name: str, photos: Sequence[FileStorage]) -> Student:
        roll_no = (roll_no or "").strip()
        name = (name or "").strip()
        if not roll_no or not name:
            raise ValidationError("Roll No and Name are required")

        uploads = [p for p in (photos or []) if p is not None]
        if len(uploads) != REQUIRED_PHOTO_COUNT:
            raise ValidationError("Two photos required")

        if self._students.get_by_roll_no(roll_no):
            raise ConflictError("Student with this roll no already exists")

        references: List[str] = []
        try:
            for upload in uploads:
                references.append(self._photos.save(upload))
            student_id = self._students.create_student(roll_no=roll_no, name=name, photos=references)
        except Exception:
            for ref in references:
                self._photos.delete(ref)
            raise

        logger.info("Student registered: roll_no=%s id=%s", roll_no, student_id)
        return Student(student_id=student_id, roll_no=roll_no, name=name, photos=tuple(references))

    def list_students(self) -> List[Student]:
        return list(self._students.list_all())

    def get_student(self, student_id: int) -> Optional[Student]:
        return self._students.get_by_id(student_id)
