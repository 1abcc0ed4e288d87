from __future__ import annotations

import json

import pytest

from src.academia_system.academia_system.core.enums import AttendanceStatus, LoadState
from src.academia_system.academia_system.database.connection import JsonFileStorage
from src.academia_system.academia_system.database.store import RecordStore, StoreDocument
from src.academia_system.academia_system.students.model import AttendanceRecord, MarkRecord, Student
from src.academia_system.academia_system.users.model import Admin, Teacher

KEY = "academia-system-db"


def _student_dict(**overrides) -> dict:
    data = {
        "id": "s1",
        "name": "Alice",
        "email": "alice@x.com",
        "role": "STUDENT",
        "studentId": "S100",
        "class": "10A",
        "attendance": [],
        "marks": [],
    }
    data.update(overrides)
    return data


def _store_json(students=(), teachers=(), admins=()) -> str:
    return json.dumps({"students": list(students), "teachers": list(teachers), "admins": list(admins)})


def _sample_document() -> StoreDocument:
    return StoreDocument(
        students=[
            Student(
                id="s1",
                name="Alice",
                email="alice@x.com",
                student_id="S100",
                class_name="10A",
                attendance=(AttendanceRecord(month="Jan", status=AttendanceStatus.PRESENT),),
                marks=(MarkRecord(month="Jan", subject="Math", marks=85),),
            )
        ],
        teachers=[
            Teacher(id="t1", name="Mary", email="mary@x.com", teacher_id="T1", department="Math", classes=("10A",))
        ],
        admins=[Admin(id="a1", name="Root", email="root@x.com")],
    )


def test_load_absent_initializes_and_persists_empty_store(storage, store):
    assert store.inspect() == (LoadState.ABSENT, None)

    doc = store.load()

    assert doc == StoreDocument()
    assert json.loads(storage.items[KEY]) == {"students": [], "teachers": [], "admins": []}


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "[]",
        json.dumps({"students": [], "teachers": []}),
        json.dumps({"students": {}, "teachers": [], "admins": []}),
        json.dumps({"students": [{"id": "s1"}], "teachers": [], "admins": []}),
        json.dumps({"students": [], "teachers": [], "admins": [{"id": "t1", "name": "T", "email": "t@x", "role": "TEACHER",
                                                               "teacherId": "T1", "department": "D", "classes": []}]}),
        pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
        _store_json(students=[_student_dict(attendance=[{"month": "Jan", "status": "Present"}, {"month": "Jan", "status": "Absent"}])]),
        _store_json(students=[_student_dict(marks=[{"month": "Jan", "subject": "Math", "marks": 80},
                                                   {"month": "Jan", "subject": "Math", "marks": 90}])]),
        _store_json(students=[_student_dict(marks=[{"month": "Jan", "subject": "Math", "marks": 250}])]),
        _store_json(students=[_student_dict(marks=[{"month": "Jan", "subject": "Math", "marks": -1}])]),
        _store_json(students=[_student_dict(name=None)]),
        _store_json(students=[_student_dict(studentId=100)]),
        _store_json(students=[_student_dict(attendance={"Jan": "Present"})]),
        _store_json(students=[_student_dict(), _student_dict(id="s2", email="other@x.com")]),
        _store_json(students=[_student_dict(), _student_dict(id="s2", studentId="S200")]),
        _store_json(
            students=[_student_dict()],
            admins=[{"id": "a1", "name": "Root", "email": "alice@x.com", "role": "ADMIN"}],
        ),
    ],
)
def test_corrupt_payload_resets_to_empty_store(storage, store, raw):
    storage.items[KEY] = raw

    state, _ = store.inspect()
    assert state == LoadState.CORRUPT

    assert store.load() == StoreDocument()
    assert json.loads(storage.items[KEY]) == {"students": [], "teachers": [], "admins": []}


def test_save_then_load_round_trips(store):
    doc = _sample_document()
    store.save(doc)

    assert store.load() == doc


def test_persisted_layout_uses_camel_case_keys(storage, store):
    store.save(_sample_document())

    payload = json.loads(storage.items[KEY])
    assert payload["students"][0] == {
        "id": "s1",
        "name": "Alice",
        "email": "alice@x.com",
        "role": "STUDENT",
        "studentId": "S100",
        "class": "10A",
        "attendance": [{"month": "Jan", "status": "Present"}],
        "marks": [{"month": "Jan", "subject": "Math", "marks": 85}],
    }
    assert payload["teachers"][0]["teacherId"] == "T1"
    assert payload["admins"][0] == {"id": "a1", "name": "Root", "email": "root@x.com", "role": "ADMIN"}


def test_fresh_process_sees_saved_document(tmp_path):
    doc = _sample_document()
    RecordStore(JsonFileStorage(tmp_path)).save(doc)

    # New storage and store objects over the same directory.
    assert RecordStore(JsonFileStorage(tmp_path)).load() == doc


def test_transaction_saves_on_success(storage, store):
    with store.transaction() as db:
        db.admins.append(Admin(id="a1", name="Root", email="root@x.com"))

    assert store.load().admins == [Admin(id="a1", name="Root", email="root@x.com")]


def test_transaction_writes_nothing_when_body_raises(storage, store):
    store.save(StoreDocument())
    writes = storage.writes

    with pytest.raises(RuntimeError):
        with store.transaction() as db:
            db.admins.append(Admin(id="a1", name="Root", email="root@x.com"))
            raise RuntimeError("boom")

    assert storage.writes == writes
    assert store.load().admins == []


def test_json_file_storage_missing_key_returns_none(tmp_path):
    storage = JsonFileStorage(tmp_path / "nested")

    assert storage.get_item("nope") is None
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"
    storage.remove_item("k")
    assert storage.get_item("k") is None


@pytest.mark.parametrize(
    "raw",
    [
        pytest.param(b'{"students": [], "teachers": [], "admins": [] \xff}', id="bad-utf8-tail"),
        pytest.param(b"\xfe\xff\x00{", id="bad-utf8-head"),
        pytest.param(b"[" * 100000 + b"]" * 100000, id="deeply-nested"),
    ],
)
def test_unreadable_store_file_resets_to_empty_store(tmp_path, raw):
    (tmp_path / f"{KEY}.json").write_bytes(raw)
    store = RecordStore(JsonFileStorage(tmp_path))

    assert store.inspect() == (LoadState.CORRUPT, None)
    assert store.load() == StoreDocument()
    assert json.loads((tmp_path / f"{KEY}.json").read_text(encoding="utf-8")) == {
        "students": [],
        "teachers": [],
        "admins": [],
    }


def test_valid_student_record_with_full_history_loads(storage, store):
    storage.items[KEY] = _store_json(
        students=[
            _student_dict(
                attendance=[{"month": "Jan", "status": "Present"}, {"month": "Feb", "status": "Late"}],
                marks=[
                    {"month": "Jan", "subject": "Math", "marks": 0},
                    {"month": "Jan", "subject": "Science", "marks": 100},
                ],
            )
        ]
    )

    state, doc = store.inspect()

    assert state == LoadState.VALID
    assert len(doc.students[0].attendance) == 2
    assert len(doc.students[0].marks) == 2
