from __future__ import annotations

import io
import os
from datetime import datetime

import pytest
from werkzeug.datastructures import FileStorage

os.environ.setdefault("APP_ENV", "testing")

from lecture_attendance.attendance.service import AttendanceService
from lecture_attendance.auth.tokens import SessionIssuer
from lecture_attendance.container import wire
from lecture_attendance.lectures.service import LectureService
from lecture_attendance.main import create_app
from lecture_attendance.students.photo_store import LocalPhotoStore
from lecture_attendance.students.service import RosterService
from lecture_attendance.users.service import IdentityService

from fakes import (
    InMemoryAttendance,
    InMemoryLectures,
    InMemoryPhotoStore,
    InMemoryStudents,
    InMemoryUsers,
)

JWT_TEST_SECRET = "test-jwt-secret"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 30, 0)


@pytest.fixture
def make_photo():
    def _make(name: str = "face.jpg", data: bytes = b"\xff\xd8fake-jpeg") -> FileStorage:
        return FileStorage(stream=io.BytesIO(data), filename=name, content_type="image/jpeg")

    return _make


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def lectures_repo() -> InMemoryLectures:
    return InMemoryLectures()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def photo_store() -> InMemoryPhotoStore:
    return InMemoryPhotoStore()


@pytest.fixture
def identity_service(users_repo) -> IdentityService:
    return IdentityService(users_repo)


@pytest.fixture
def issuer() -> SessionIssuer:
    return SessionIssuer(JWT_TEST_SECRET)


@pytest.fixture
def roster_service(students_repo, photo_store) -> RosterService:
    return RosterService(students_repo, photo_store)


@pytest.fixture
def lecture_service(lectures_repo) -> LectureService:
    return LectureService(lectures_repo)


@pytest.fixture
def attendance_service(attendance_repo, students_repo, lectures_repo, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_repo, students_repo, lectures_repo, clock=lambda: fixed_now)


@pytest.fixture
def app(tmp_path, users_repo, students_repo, lectures_repo, attendance_repo, issuer):
    container = wire(
        users_repo=users_repo,
        students_repo=students_repo,
        lectures_repo=lectures_repo,
        attendance_repo=attendance_repo,
        photo_store=LocalPhotoStore(tmp_path),
        session_issuer=issuer,
    )
    return create_app(
        container=container,
        overrides={"TESTING": True, "UPLOAD_FOLDER": str(tmp_path), "SEED_DEMO_USER": True},
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(issuer):
    return {"Authorization": f"Bearer {issuer.issue('Akash')}"}
