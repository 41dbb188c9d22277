from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..common.datetime_utils import isoformat_millis
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the students present at one lecture on one calendar day.

    `date` is the start of the day window. `students_present` keeps marking
    order and never contains duplicates. A record that has not been persisted
    yet (the empty answer to a query) has no attendance_id.
    """

    attendance_id: Optional[int]
    lecture_id: int
    date: datetime
    students_present: Tuple[int, ...] = ()

    def has_student(self, student_id: int) -> bool:
        return int(student_id) in self.students_present

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "lecture": self.lecture_id,
            "date": isoformat_millis(self.date),
            "studentsPresent": list(self.students_present),
        }


@dataclass(frozen=True)
class AttendanceView:
    """Read-model: a record with its present students resolved to full entities."""

    attendance_id: Optional[int]
    lecture_id: int
    date: datetime
    students_present: Tuple[Student, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "lecture": self.lecture_id,
            "date": isoformat_millis(self.date),
            "studentsPresent": [s.to_dict() for s in self.students_present],
        }
