from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student.

    `photos` holds the stable references returned by the photo store, in upload order.
    """

    student_id: int
    roll_no: str
    name: str
    photos: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "rollNo": self.roll_no,
            "name": self.name,
            "photos": list(self.photos),
        }
