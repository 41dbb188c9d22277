from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_in_window(self, *, lecture_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        """The record for lecture_id whose date lies in [start, end], if any."""
        raise NotImplementedError

    def get_or_create(self, *, lecture_id: int, day_start: datetime) -> AttendanceRecord:
        """Return the record anchored at day_start, creating an empty one if missing.

        Must never create a second record for the same (lecture, day).
        """
        raise NotImplementedError

    def add_present(self, *, attendance_id: int, student_id: int) -> bool:
        """Add a student to a record; False if the student was already present."""
        raise NotImplementedError
