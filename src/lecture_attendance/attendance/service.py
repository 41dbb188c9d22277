from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import day_window, now_local, resolve_day
from ..common.locks import KeyedLock
from ..common.validators import require_int
from ..core.exceptions import ConflictError, NotFoundError
from ..lectures.repository import LectureRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DayInput = Optional[Union[str, datetime]]


class AttendanceService:
    """The attendance ledger: one record per lecture per calendar day.

    Marks are serialized per (lecture, day) so the membership check and the
    insert happen as one step; marks for other keys proceed in parallel.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        lectures: LectureRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        locks: KeyedLock | None = None,
    ):
        self._attendance = attendance
        self._students = students
        self._lectures = lectures
        self._clock = clock
        self._locks = locks or KeyedLock()

    def _window(self, day: DayInput) -> tuple[datetime, datetime]:
        return day_window(resolve_day(day, now=self._clock()))

    def query(self, lecture_id: int, day: DayInput = None) -> AttendanceView:
        """Attendance for a lecture on a day (today by default).

        Never fails for a missing record: an empty record anchored at the
        start of the day is returned instead. The lecture id is not checked.
        """
        lecture_id = require_int(lecture_id, "lectureId")
        start, end = self._window(day)

        record = self._attendance.find_in_window(lecture_id=lecture_id, start=start, end=end)
        if not record:
            return AttendanceView(attendance_id=None, lecture_id=lecture_id, date=start, students_present=())

        students = self._students.get_many(record.students_present)
        return AttendanceView(
            attendance_id=record.attendance_id,
            lecture_id=record.lecture_id,
            date=record.date,
            students_present=tuple(students),
        )

    def mark_present(self, lecture_id: int, student_id: int, day: DayInput = None) -> AttendanceRecord:
        """Mark a student present; only the first mark per (lecture, student, day) succeeds."""
        lecture_id = require_int(lecture_id, "lectureId")
        student_id = require_int(student_id, "studentId")
        start, end = self._window(day)

        if not self._lectures.get_by_id(lecture_id):
            raise NotFoundError("Lecture not found")
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        with self._locks.hold((lecture_id, start.date())):
            record = self._attendance.find_in_window(lecture_id=lecture_id, start=start, end=end)
            if record and record.has_student(student_id):
                raise ConflictError("Student already marked present")

            if not record:
                record = self._attendance.get_or_create(lecture_id=lecture_id, day_start=start)

            if not self._attendance.add_present(attendance_id=record.attendance_id, student_id=student_id):
                raise ConflictError("Student already marked present")

            updated = self._attendance.find_in_window(lecture_id=lecture_id, start=start, end=end)

        logger.info("Attendance marked: lecture=%s student=%s day=%s", lecture_id, student_id, start.date())
        return updated
