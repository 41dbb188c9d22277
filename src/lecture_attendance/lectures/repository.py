from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import Lecture


class LectureRepository(Protocol):
    def get_by_id(self, lecture_id: int) -> Optional[Lecture]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Lecture]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def insert_many(self, rows: Sequence[Tuple[str, str, str]]) -> None:
        """Insert (name, room_no, section) rows in the given order."""
        raise NotImplementedError
