from __future__ import annotations

import pytest

from lecture_attendance.core.exceptions import ConflictError, StorageUnavailableError, ValidationError


def test_register_student_stores_two_photo_references(roster_service, photo_store, make_photo):
    student = roster_service.register_student("R1", "Asha", [make_photo("a.jpg"), make_photo("b.png")])

    assert student.roll_no == "R1"
    assert student.name == "Asha"
    assert student.photos == tuple(photo_store.saved)
    assert len(student.photos) == 2
    assert roster_service.list_students() == [student]


def test_register_duplicate_roll_no_conflicts(roster_service, students_repo, photo_store, make_photo):
    roster_service.register_student("R1", "Asha", [make_photo(), make_photo()])

    with pytest.raises(ConflictError):
        roster_service.register_student("R1", "Someone Else", [make_photo(), make_photo()])

    assert [s.roll_no for s in students_repo.list_all()] == ["R1"]
    # the rejected registration never reached the photo store
    assert len(photo_store.saved) == 2


@pytest.mark.parametrize("count", [0, 1, 3])
def test_register_requires_exactly_two_photos(roster_service, students_repo, photo_store, make_photo, count):
    with pytest.raises(ValidationError, match="Two photos required"):
        roster_service.register_student("R1", "Asha", [make_photo() for _ in range(count)])

    assert students_repo.list_all() == []
    assert photo_store.saved == []


@pytest.mark.parametrize("roll_no, name", [("", "Asha"), ("R1", ""), ("   ", "Asha"), (None, "Asha")])
def test_register_requires_roll_no_and_name(roster_service, make_photo, roll_no, name):
    with pytest.raises(ValidationError, match="Roll No and Name are required"):
        roster_service.register_student(roll_no, name, [make_photo(), make_photo()])


def test_register_strips_whitespace(roster_service, make_photo):
    student = roster_service.register_student("  R7 ", " Ravi  ", [make_photo(), make_photo()])
    assert (student.roll_no, student.name) == ("R7", "Ravi")


def test_failed_insert_removes_stored_photos(roster_service, students_repo, photo_store, make_photo):
    students_repo.fail_next_create = StorageUnavailableError("Database operation failed")

    with pytest.raises(StorageUnavailableError):
        roster_service.register_student("R1", "Asha", [make_photo(), make_photo()])

    assert photo_store.deleted == photo_store.saved
    assert students_repo.list_all() == []


def test_get_student(roster_service, make_photo):
    student = roster_service.register_student("R1", "Asha", [make_photo(), make_photo()])
    assert roster_service.get_student(student.student_id) == student
    assert roster_service.get_student(999) is None


def test_student_serialization(roster_service, make_photo):
    student = roster_service.register_student("R1", "Asha", [make_photo("a.jpg"), make_photo("b.jpg")])
    assert student.to_dict() == {
        "id": student.student_id,
        "rollNo": "R1",
        "name": "Asha",
        "photos": list(student.photos),
    }
