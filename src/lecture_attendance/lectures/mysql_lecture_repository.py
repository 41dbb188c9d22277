from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Lecture
from .repository import LectureRepository


def _row_to_lecture(r: dict) -> Lecture:
    return Lecture(
        lecture_id=int(r["lecture_id"]),
        name=r["name"],
        room_no=r["room_no"],
        section=r["section"],
    )


class MySQLLectureRepository(LectureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, lecture_id: int) -> Optional[Lecture]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT lecture_id, name, room_no, section FROM lectures WHERE lecture_id=%s",
                (int(lecture_id),),
            )
            row = fetchone(cur)
            return _row_to_lecture(row) if row else None

    def list_all(self) -> Sequence[Lecture]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT lecture_id, name, room_no, section FROM lectures ORDER BY lecture_id")
            return [_row_to_lecture(r) for r in fetchall(cur)]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS c FROM lectures")
            return int(fetchone(cur)["c"])

    def insert_many(self, rows: Sequence[Tuple[str, str, str]]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT IGNORE INTO lectures(name, room_no, section) VALUES(%s,%s,%s)",
                list(rows),
            )
