from __future__ import annotations

import pytest

from src.academia_system.academia_system.main import create_app


@pytest.fixture
def app(monkeypatch, tmp_path, storage):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATA_DIR": str(tmp_path), "AUTO_INIT_DB": True}, storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email, role):
    return client.post("/api/auth/login", json={"email": email, "role": role})


@pytest.fixture
def admin_client(client):
    assert client.post("/api/auth/signup", json={"name": "Root", "email": "root@x.com"}).status_code == 201
    assert _login(client, "root@x.com", "ADMIN").status_code == 200
    return client


def test_login_unknown_user_is_401(client):
    resp = _login(client, "ghost@x.com", "STUDENT")

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials or role."}


def test_routes_require_session(client):
    assert client.get("/api/students").status_code == 401
    assert client.get("/api/dashboard").status_code == 401


def test_signup_duplicate_is_409(client):
    client.post("/api/auth/signup", json={"name": "Root", "email": "root@x.com"})

    resp = client.post("/api/auth/signup", json={"name": "Again", "email": "root@x.com"})

    assert resp.status_code == 409


def test_admin_manages_students(admin_client):
    resp = admin_client.post(
        "/api/students", json={"name": "Alice", "email": "alice@x.com", "studentId": "S100", "class": "10A"}
    )
    assert resp.status_code == 201
    alice = resp.get_json()
    assert alice["role"] == "STUDENT"
    assert alice["attendance"] == [] and alice["marks"] == []

    dup = admin_client.post(
        "/api/students", json={"name": "Alice 2", "email": "alice2@x.com", "studentId": "S100", "class": "10A"}
    )
    assert dup.status_code == 409

    missing = admin_client.post("/api/students", json={"name": "", "email": "b@x.com", "studentId": "S2", "class": "10A"})
    assert missing.status_code == 400

    assert [s["email"] for s in admin_client.get("/api/students").get_json()] == ["alice@x.com"]
    assert admin_client.delete(f"/api/students/{alice['id']}").status_code == 200
    assert admin_client.delete(f"/api/students/{alice['id']}").status_code == 404


def test_teacher_records_attendance_and_marks(admin_client):
    alice = admin_client.post(
        "/api/students", json={"name": "Alice", "email": "alice@x.com", "studentId": "S100", "class": "10A"}
    ).get_json()
    teacher = admin_client.post(
        "/api/teachers",
        json={"name": "Mary", "email": "mary@x.com", "teacherId": "T1", "department": "Math", "classes": "10A, 10B"},
    ).get_json()
    assert teacher["classes"] == ["10A", "10B"]

    admin_client.post("/api/auth/logout")
    assert _login(admin_client, "mary@x.com", "TEACHER").status_code == 200
    client = admin_client

    assert client.put(f"/api/students/{alice['id']}/attendance", json={"month": "Jan", "status": "Present"}).status_code == 200
    assert client.put(f"/api/students/{alice['id']}/attendance", json={"month": "Jan", "status": "Sick"}).status_code == 400
    assert client.put(f"/api/students/{alice['id']}/marks", json={"month": "Jan", "subject": "Math", "marks": "85"}).status_code == 200
    assert client.put(f"/api/students/{alice['id']}/marks", json={"month": "Jan", "subject": "Math", "marks": 150}).status_code == 400
    assert client.put("/api/students/missing/marks", json={"month": "Jan", "subject": "Math", "marks": 50}).status_code == 404

    students = client.get("/api/classes/10A/students").get_json()
    assert students[0]["attendance"] == [{"month": "Jan", "status": "Present"}]
    assert students[0]["marks"] == [{"month": "Jan", "subject": "Math", "marks": 85}]

    home = client.get("/api/dashboard").get_json()
    assert home["role"] == "TEACHER"
    assert home["home"]["total_students"] == 1

    # Teachers cannot manage accounts.
    assert client.get("/api/teachers").status_code == 403


def test_student_dashboard_and_own_record_only(admin_client):
    alice = admin_client.post(
        "/api/students", json={"name": "Alice", "email": "alice@x.com", "studentId": "S100", "class": "10A"}
    ).get_json()
    bob = admin_client.post(
        "/api/students", json={"name": "Bob", "email": "bob@x.com", "studentId": "S101", "class": "10A"}
    ).get_json()

    admin_client.post("/api/auth/logout")
    client = admin_client
    assert _login(client, "alice@x.com", "STUDENT").get_json()["id"] == alice["id"]

    assert client.get(f"/api/students/{alice['id']}").status_code == 200
    assert client.get(f"/api/students/{bob['id']}").status_code == 403

    body = client.get("/api/dashboard").get_json()
    assert body["role"] == "STUDENT"
    assert body["summary"]["percentage"] == 0.0
    assert body["summary"]["class_name"] == "10A"


def test_deleted_account_session_is_rejected(admin_client):
    admin_client.post("/api/students", json={"name": "Alice", "email": "alice@x.com", "studentId": "S100", "class": "10A"})
    admin_client.post("/api/auth/logout")
    _login(admin_client, "alice@x.com", "STUDENT")

    with admin_client.session_transaction() as sess:
        sess["user_id"] = "gone"

    assert admin_client.get("/api/auth/me").status_code == 401


def test_admin_dashboard_overview(admin_client):
    admin_client.post("/api/students", json={"name": "Alice", "email": "alice@x.com", "studentId": "S100", "class": "10A"})

    body = admin_client.get("/api/dashboard").get_json()

    assert body["role"] == "ADMIN"
    assert body["overview"]["total_students"] == 1
    assert body["overview"]["classes"] == [{"name": "10A", "students": 1, "attendance": 0.0}]


def test_login_answers_from_a_single_lookup(app, client, monkeypatch):
    client.post("/api/auth/signup", json={"name": "Root", "email": "root@x.com"})

    async def no_reload(*args, **kwargs):
        raise AssertionError("login should not reload the account")

    monkeypatch.setattr(app.extensions["academia_container"].directory, "get_user", no_reload)

    resp = _login(client, "root@x.com", "ADMIN")

    assert resp.status_code == 200
    assert resp.get_json()["email"] == "root@x.com"


def test_teacher_cannot_grade_students_outside_own_classes(admin_client):
    david = admin_client.post(
        "/api/students", json={"name": "David", "email": "david@x.com", "studentId": "S103", "class": "11A"}
    ).get_json()
    admin_client.post(
        "/api/teachers",
        json={"name": "Mary", "email": "mary@x.com", "teacherId": "T1", "department": "Math", "classes": ["10A"]},
    )

    # Admins are not limited to a class list.
    assert admin_client.put(f"/api/students/{david['id']}/attendance", json={"month": "Jan", "status": "Late"}).status_code == 200

    admin_client.post("/api/auth/logout")
    _login(admin_client, "mary@x.com", "TEACHER")

    assert admin_client.put(f"/api/students/{david['id']}/attendance", json={"month": "Jan", "status": "Present"}).status_code == 403
    assert admin_client.put(
        f"/api/students/{david['id']}/marks", json={"month": "Jan", "subject": "Math", "marks": 90}
    ).status_code == 403

    admin_client.post("/api/auth/logout")
    _login(admin_client, "root@x.com", "ADMIN")
    record = admin_client.get(f"/api/students/{david['id']}").get_json()
    assert record["attendance"] == [{"month": "Jan", "status": "Late"}]
    assert record["marks"] == []
