from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_roll_no(self, roll_no: str) -> Optional[Student]:
        raise NotImplementedError

    def get_many(self, student_ids: Iterable[int]) -> Sequence[Student]:
        """Students for the given ids, in the order given; unknown ids are skipped."""
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def create_student(self, *, roll_no: str, name: str, photos: Sequence[str]) -> int:
        """Insert a student; raises ConflictError if the roll number is taken."""
        raise NotImplementedError
