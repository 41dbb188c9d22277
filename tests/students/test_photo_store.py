from __future__ import annotations

from lecture_attendance.students.photo_store import LocalPhotoStore


def test_save_writes_file_and_returns_reference(tmp_path, make_photo):
    store = LocalPhotoStore(tmp_path)

    ref = store.save(make_photo("My Face.JPG", b"abc"))

    assert ref.startswith("/uploads/students/photos-")
    assert ref.endswith(".jpg")
    stored = tmp_path / "students" / ref.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"abc"


def test_two_saves_get_distinct_references(tmp_path, make_photo):
    store = LocalPhotoStore(tmp_path)
    assert store.save(make_photo()) != store.save(make_photo())


def test_delete_removes_file_and_ignores_foreign_refs(tmp_path, make_photo):
    store = LocalPhotoStore(tmp_path)
    ref = store.save(make_photo())
    stored = tmp_path / "students" / ref.rsplit("/", 1)[1]

    store.delete(ref)
    store.delete(ref)
    store.delete("/etc/passwd")
    store.delete("/uploads/students/../../secret")

    assert not stored.exists()
