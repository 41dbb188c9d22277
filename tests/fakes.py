from __future__ import annotations

import threading
from datetime import datetime, time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from werkzeug.datastructures import FileStorage

from lecture_attendance.attendance.model import AttendanceRecord
from lecture_attendance.core.exceptions import ConflictError
from lecture_attendance.lectures.model import Lecture
from lecture_attendance.students.model import Student
from lecture_attendance.users.model import Credential


class InMemoryUsers:
    def __init__(self):
        self._by_username: Dict[str, Credential] = {}
        self._id = 0
        self.updates = 0

    def get_by_username(self, username: str) -> Optional[Credential]:
        return self._by_username.get(username)

    def create_user(self, *, username: str, password_hash: str) -> int:
        if username in self._by_username:
            raise ConflictError("Username already exists")
        self._id += 1
        self._by_username[username] = Credential(user_id=self._id, username=username, password_hash=password_hash)
        return self._id

    def update_password_hash(self, *, username: str, password_hash: str) -> bool:
        user = self._by_username.get(username)
        if not user:
            return False
        self._by_username[username] = Credential(user_id=user.user_id, username=username, password_hash=password_hash)
        self.updates += 1
        return True


class InMemoryStudents:
    def __init__(self):
        self._by_id: Dict[int, Student] = {}
        self._id = 0
        self.fail_next_create: Optional[Exception] = None

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._by_id.get(int(student_id))

    def get_by_roll_no(self, roll_no: str) -> Optional[Student]:
        return next((s for s in self._by_id.values() if s.roll_no == roll_no), None)

    def get_many(self, student_ids: Iterable[int]) -> Sequence[Student]:
        return [self._by_id[i] for i in student_ids if i in self._by_id]

    def list_all(self) -> Sequence[Student]:
        return list(self._by_id.values())

    def create_student(self, *, roll_no: str, name: str, photos: Sequence[str]) -> int:
        if self.fail_next_create is not None:
            error, self.fail_next_create = self.fail_next_create, None
            raise error
        if self.get_by_roll_no(roll_no):
            raise ConflictError("Student with this roll no already exists")
        self._id += 1
        self._by_id[self._id] = Student(student_id=self._id, roll_no=roll_no, name=name, photos=tuple(photos))
        return self._id


class InMemoryLectures:
    """Mimics the unique (name, room_no, section) key: duplicate rows are skipped."""

    def __init__(self):
        self._rows: List[Lecture] = []
        self.insert_calls = 0

    def get_by_id(self, lecture_id: int) -> Optional[Lecture]:
        return next((lec for lec in self._rows if lec.lecture_id == int(lecture_id)), None)

    def list_all(self) -> Sequence[Lecture]:
        return list(self._rows)

    def count(self) -> int:
        return len(self._rows)

    def insert_many(self, rows: Sequence[Tuple[str, str, str]]) -> None:
        self.insert_calls += 1
        for name, room_no, section in rows:
            if any((lec.name, lec.room_no, lec.section) == (name, room_no, section) for lec in self._rows):
                continue
            self._rows.append(
                Lecture(lecture_id=len(self._rows) + 1, name=name, room_no=room_no, section=section)
            )


class InMemoryAttendance:
    """Mimics the database: thread-safe, and refuses duplicate presence rows."""

    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[int, Tuple[int, datetime]] = {}
        self._present: Dict[int, List[int]] = {}
        self._id = 0

    def _build(self, attendance_id: int) -> AttendanceRecord:
        lecture_id, day = self._records[attendance_id]
        return AttendanceRecord(
            attendance_id=attendance_id,
            lecture_id=lecture_id,
            date=day,
            students_present=tuple(self._present[attendance_id]),
        )

    def records_for(self, lecture_id: int) -> List[AttendanceRecord]:
        with self._lock:
            return [self._build(i) for i, (lec, _) in self._records.items() if lec == lecture_id]

    def find_in_window(self, *, lecture_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        with self._lock:
            for attendance_id, (lec, day) in self._records.items():
                if lec == lecture_id and start <= day <= end:
                    return self._build(attendance_id)
            return None

    def get_or_create(self, *, lecture_id: int, day_start: datetime) -> AttendanceRecord:
        start = datetime.combine(day_start.date(), time.min)
        end = datetime.combine(day_start.date(), time.max)
        with self._lock:
            for attendance_id, (lec, day) in self._records.items():
                if lec == lecture_id and start <= day <= end:
                    return self._build(attendance_id)
            self._id += 1
            self._records[self._id] = (lecture_id, start)
            self._present[self._id] = []
            return self._build(self._id)

    def add_present(self, *, attendance_id: int, student_id: int) -> bool:
        with self._lock:
            present = self._present[attendance_id]
            if student_id in present:
                return False
            present.append(student_id)
            return True


class InMemoryPhotoStore:
    def __init__(self):
        self.saved: List[str] = []
        self.deleted: List[str] = []

    def save(self, upload: FileStorage) -> str:
        ref = f"/uploads/students/photo-{len(self.saved) + 1}-{upload.filename}"
        self.saved.append(ref)
        return ref

    def delete(self, reference: str) -> None:
        self.deleted.append(reference)
