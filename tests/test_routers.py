# /tests/test_routers.py

import pytest

from app.db.models.class_student_models import ClassAssignment

STUDENTS = "/api/v1/students"
CLASSES = "/api/v1/classes"

# --- Helpers ---

def _create_student(client, first="John", last="Doe"):
    response = client.post(STUDENTS, json={"firstName": first, "lastName": last})
    assert response.status_code == 201
    return response.json()["data"]

def _create_class(client, name="Math", **extra):
    response = client.post(CLASSES, json={"name": name, **extra})
    assert response.status_code == 201
    return response.json()["data"]

# --- Health & Root ---

def test_root_banner(client):
    body = client.get("/").json()
    assert body["version"] == "1.0.0"

def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

# --- Students ---

def test_create_student_returns_envelope_with_empty_classes(client):
    student = _create_student(client)
    assert student["firstName"] == "John"
    assert student["lastName"] == "Doe"
    assert student["classIds"] == []

@pytest.mark.parametrize("payload", [
    {"firstName": "", "lastName": "Doe"},
    {"firstName": "John", "lastName": "x" * 65},
    {"firstName": "John"},
])
def test_create_student_rejects_invalid_body(client, payload):
    response = client.post(STUDENTS, json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"
    assert client.get(STUDENTS).json()["data"] == []

def test_get_missing_student_is_404(client):
    assert client.get(f"{STUDENTS}/missing").status_code == 404

def test_update_student_partial(client):
    student = _create_student(client)
    response = client.put(f"{STUDENTS}/{student['id']}", json={"firstName": "Johnny"})
    assert response.status_code == 200
    assert response.json()["data"]["lastName"] == "Doe"
    assert response.json()["data"]["firstName"] == "Johnny"

def test_update_missing_student_is_404(client):
    assert client.put(f"{STUDENTS}/missing", json={"firstName": "X"}).status_code == 404

def test_delete_student_then_delete_again_is_404(client):
    student = _create_student(client)
    assert client.delete(f"{STUDENTS}/{student['id']}").status_code == 204
    assert client.delete(f"{STUDENTS}/{student['id']}").status_code == 404

def test_list_students_sorted_with_class_ids(client):
    zed = _create_student(client, "Zed", "Young")
    amy = _create_student(client, "Amy", "Adams")
    math = _create_class(client, "Math")
    client.post(f"{STUDENTS}/{zed['id']}/assign-class", json={"classId": math["id"]})

    data = client.get(STUDENTS).json()["data"]

    assert [s["id"] for s in data] == [amy["id"], zed["id"]]
    assert data[1]["classIds"] == [math["id"]]

# --- Assignments ---

def test_assign_and_unassign_flow(client):
    student = _create_student(client)
    math = _create_class(client)
    path = f"{STUDENTS}/{student['id']}/assign-class"

    assert client.post(path, json={"classId": math["id"]}).status_code == 204
    assert client.post(path, json={"classId": math["id"]}).status_code == 409
    assert client.get(f"{STUDENTS}/{student['id']}").json()["data"]["classIds"] == [math["id"]]

    remove = f"{STUDENTS}/{student['id']}/classes/{math['id']}"
    assert client.delete(remove).status_code == 204
    assert client.delete(remove).status_code == 404

def test_assign_by_query_parameters(client):
    student = _create_student(client)
    math = _create_class(client)
    response = client.post(f"{STUDENTS}/classes/assign", params={"studentId": student["id"], "classId": math["id"]})
    assert response.status_code == 204
    assert client.get(f"{CLASSES}/{math['id']}/students").json()["data"][0]["id"] == student["id"]

def test_assign_unknown_student_is_404(client):
    math = _create_class(client)
    response = client.post(f"{STUDENTS}/nonexistent-id/assign-class", json={"classId": math["id"]})
    assert response.status_code == 404

def test_replace_student_classes(client):
    student = _create_student(client)
    math, art = _create_class(client, "Math"), _create_class(client, "Art")
    client.post(f"{STUDENTS}/{student['id']}/assign-class", json={"classId": math["id"]})

    response = client.put(f"{STUDENTS}/{student['id']}/classes", json={"classIds": [art["id"]]})

    assert response.status_code == 200
    assert response.json()["data"]["classIds"] == [art["id"]]

# --- Classes ---

def test_class_without_description_omits_field(client):
    created = _create_class(client)
    assert "description" not in created
    fetched = client.get(f"{CLASSES}/{created['id']}").json()["data"]
    assert "description" not in fetched

def test_class_with_description(client):
    created = _create_class(client, description="Algebra and geometry")
    assert created["description"] == "Algebra and geometry"

def test_create_class_rejects_long_name(client):
    assert client.post(CLASSES, json={"name": "x" * 129}).status_code == 400

def test_update_and_delete_missing_class_is_404(client):
    assert client.put(f"{CLASSES}/missing", json={"name": "X"}).status_code == 404
    assert client.delete(f"{CLASSES}/missing").status_code == 404

def test_list_classes_sorted_by_name(client):
    _create_class(client, "Physics")
    _create_class(client, "Art")
    assert [c["name"] for c in client.get(CLASSES).json()["data"]] == ["Art", "Physics"]

def test_class_students_and_delete_cascade(client):
    student = _create_student(client)
    math = _create_class(client)
    client.post(f"{STUDENTS}/{student['id']}/assign-class", json={"classId": math["id"]})

    by_path = client.get(f"{CLASSES}/{math['id']}/students").json()["data"]
    by_query = client.get(f"{CLASSES}/students", params={"classId": math["id"]}).json()["data"]
    assert by_path == by_query == [{**student, "classIds": [math["id"]]}]

    assert client.delete(f"{CLASSES}/{math['id']}").status_code == 204
    assert client.get(f"{STUDENTS}/{student['id']}").json()["data"]["classIds"] == []

def test_students_of_missing_class_is_404(client):
    assert client.get(f"{CLASSES}/missing/students").status_code == 404

def test_bulk_assign_and_remove(client):
    a, b = _create_student(client, "A", "One"), _create_student(client, "B", "Two")
    math = _create_class(client)

    added = client.post(f"{CLASSES}/{math['id']}/students", json={"studentIds": [a["id"], b["id"]]})
    assert added.json()["data"] == {"assigned": 2, "classId": math["id"]}

    removed = client.request("DELETE", f"{CLASSES}/{math['id']}/students", json={"studentIds": [a["id"]]})
    assert removed.json()["data"] == {"removed": 1, "classId": math["id"]}

def test_summary_and_export(client):
    student = _create_student(client)
    math = _create_class(client, "Math Basics")
    client.post(f"{STUDENTS}/{student['id']}/assign-class", json={"classId": math["id"]})

    summary = client.get(f"{CLASSES}/summary").json()["data"]
    assert summary == [{"id": math["id"], "name": "Math Basics", "studentCount": 1}]

    export = client.get(f"{CLASSES}/{math['id']}/export")
    assert export.status_code == 200
    assert "roster_math_basics.csv" in export.headers["content-disposition"]
    assert "John,Doe,Math Basics" in export.text

def test_export_missing_class_is_404(client):
    assert client.get(f"{CLASSES}/missing/export").status_code == 404

# --- Store Failures ---

def test_store_failure_is_500(client, database):
    _create_student(client)
    ClassAssignment.__table__.drop(database.engine)

    response = client.get(STUDENTS)

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Failed to fetch class assignments")
