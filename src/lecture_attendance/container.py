from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.tokens import SessionIssuer
from .database.connection import DBConfig, DatabaseConnection
from .lectures.mysql_lecture_repository import MySQLLectureRepository
from .lectures.repository import LectureRepository
from .lectures.service import LectureService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.photo_store import LocalPhotoStore, PhotoStore
from .students.repository import StudentRepository
from .students.service import RosterService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import IdentityService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    students_repo: StudentRepository
    lectures_repo: LectureRepository
    attendance_repo: AttendanceRepository
    photo_store: PhotoStore

    session_issuer: SessionIssuer
    identity_service: IdentityService
    roster_service: RosterService
    lecture_service: LectureService
    attendance_service: AttendanceService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    lectures_repo: LectureRepository,
    attendance_repo: AttendanceRepository,
    photo_store: PhotoStore,
    session_issuer: SessionIssuer,
    conn: Optional[DatabaseConnection] = None,
    **attendance_options,
) -> Container:
    """Build the services on top of the given repositories."""
    return Container(
        users_repo=users_repo,
        students_repo=students_repo,
        lectures_repo=lectures_repo,
        attendance_repo=attendance_repo,
        photo_store=photo_store,
        session_issuer=session_issuer,
        identity_service=IdentityService(users_repo),
        roster_service=RosterService(students_repo, photo_store),
        lecture_service=LectureService(lectures_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, lectures_repo, **attendance_options),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    upload_folder: str,
    token_ttl_hours: float = 8,
    connect_timeout: int = 10,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config, connect_timeout=connect_timeout))

    return wire(
        users_repo=MySQLUserRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        lectures_repo=MySQLLectureRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        photo_store=LocalPhotoStore(upload_folder),
        session_issuer=SessionIssuer(jwt_secret, ttl=timedelta(hours=float(token_ttl_hours))),
        conn=conn,
    )
