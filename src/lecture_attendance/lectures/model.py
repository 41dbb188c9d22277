from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Lecture:
    lecture_id: int
    name: str
    room_no: str
    section: str

    def to_dict(self) -> dict:
        return {
            "id": self.lecture_id,
            "name": self.name,
            "roomNo": self.room_no,
            "section": self.section,
        }
