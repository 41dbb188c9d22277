from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository

_SELECT = """
    SELECT s.student_id, s.roll_no, s.name, p.position, p.path
    FROM students s
    LEFT JOIN student_photos p ON p.student_id = s.student_id
"""


def _rows_to_students(rows: List[dict]) -> List[Student]:
    order: List[int] = []
    base: Dict[int, dict] = {}
    photos: Dict[int, List[tuple]] = {}
    for r in rows:
        sid = int(r["student_id"])
        if sid not in base:
            order.append(sid)
            base[sid] = r
            photos[sid] = []
        if r.get("path") is not None:
            photos[sid].append((int(r["position"]), r["path"]))

    return [
        Student(
            student_id=sid,
            roll_no=base[sid]["roll_no"],
            name=base[sid]["name"],
            photos=tuple(path for _, path in sorted(photos[sid])),
        )
        for sid in order
    ]


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _one(self, where: str, params: tuple) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY p.position", params)
            students = _rows_to_students(fetchall(cur))
            return students[0] if students else None

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._one("s.student_id=%s", (int(student_id),))

    def get_by_roll_no(self, roll_no: str) -> Optional[Student]:
        return self._one("s.roll_no=%s", (roll_no,))

    def get_many(self, student_ids: Iterable[int]) -> Sequence[Student]:
        ids = [int(i) for i in student_ids]
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE s.student_id IN ({placeholders}) ORDER BY s.student_id, p.position",
                tuple(ids),
            )
            by_id = {s.student_id: s for s in _rows_to_students(fetchall(cur))}
        return [by_id[i] for i in ids if i in by_id]

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY s.student_id, p.position")
            return _rows_to_students(fetchall(cur))

    def create_student(self, *, roll_no: str, name: str, photos: Sequence[str]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO students(roll_no, name) VALUES(%s,%s)",
                    (roll_no, name),
                )
                student_id = int(cur.lastrowid)
                cur.executemany(
                    "INSERT INTO student_photos(student_id, position, path) VALUES(%s,%s,%s)",
                    [(student_id, pos, path) for pos, path in enumerate(photos)],
                )
                return student_id
        except mysql.connector.IntegrityError as e:
            raise ConflictError("Student with this roll no already exists") from e
