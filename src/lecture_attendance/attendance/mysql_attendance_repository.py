from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    """Attendance records backed by two tables.

    UNIQUE(lecture_id, attendance_date) and the (attendance_id, student_id)
    primary key keep the invariants even across processes.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load(self, cur, where: str, params: tuple) -> Optional[AttendanceRecord]:
        cur.execute(
            f"""
            SELECT attendance_id, lecture_id, attendance_date
            FROM attendance_records
            WHERE {where}
            ORDER BY attendance_date
            LIMIT 1
            """,
            params,
        )
        r = fetchone(cur)
        if not r:
            return None

        cur.execute(
            """
            SELECT student_id
            FROM attendance_presence
            WHERE attendance_id=%s
            ORDER BY marked_at, student_id
            """,
            (int(r["attendance_id"]),),
        )
        present = tuple(int(p["student_id"]) for p in fetchall(cur))
        return AttendanceRecord(
            attendance_id=int(r["attendance_id"]),
            lecture_id=int(r["lecture_id"]),
            date=r["attendance_date"],
            students_present=present,
        )

    def find_in_window(self, *, lecture_id: int, start: datetime, end: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._load(
                cur,
                "lecture_id=%s AND attendance_date BETWEEN %s AND %s",
                (int(lecture_id), start, end),
            )

    def get_or_create(self, *, lecture_id: int, day_start: datetime) -> AttendanceRecord:
        start = datetime.combine(day_start.date(), time.min)
        end = datetime.combine(day_start.date(), time.max)
        with db_cursor(self._conn_factory) as (_, cur):
            existing = self._load(
                cur,
                "lecture_id=%s AND attendance_date BETWEEN %s AND %s",
                (int(lecture_id), start, end),
            )
            if existing:
                return existing

            # A concurrent creator in another process loses on the unique key.
            cur.execute(
                "INSERT IGNORE INTO attendance_records(lecture_id, attendance_date) VALUES(%s,%s)",
                (int(lecture_id), start),
            )
            return self._load(
                cur,
                "lecture_id=%s AND attendance_date=%s",
                (int(lecture_id), start),
            )

    def add_present(self, *, attendance_id: int, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO attendance_presence(attendance_id, student_id) VALUES(%s,%s)",
                (int(attendance_id), int(student_id)),
            )
            return cur.rowcount > 0
