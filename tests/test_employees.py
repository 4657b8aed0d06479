import pytest

from eventhub.extensions import db
from eventhub.models import Assignment, Employee


@pytest.fixture
def make_employee(client, admin_headers):
    def _make_employee(name="John Smith", role="Event Coordinator", salary=55000):
        response = client.post(
            "/employees",
            json={"name": name, "role": role, "salary": salary},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()["employeeId"]

    return _make_employee


def test_create_and_list_employees_ordered_by_name(client, admin_headers, make_employee):
    make_employee(name="Zoe")
    make_employee(name="Adam", role="Technical Support", salary="52000.50")

    response = client.get("/employees", headers=admin_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert [e["name"] for e in body] == ["Adam", "Zoe"]
    assert body[0]["salary"] == 52000.5
    assert body[0]["hireDate"] is not None


def test_get_employee(client, admin_headers, make_employee):
    employee_id = make_employee()

    response = client.get(f"/employees/{employee_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.get_json()["role"] == "Event Coordinator"


def test_get_missing_employee_is_404(client, admin_headers):
    assert client.get("/employees/42", headers=admin_headers).status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {"role": "Coordinator", "salary": 1000},
        {"name": "John", "salary": 1000},
        {"name": "John", "role": "Coordinator"},
    ],
)
def test_create_employee_requires_fields(client, admin_headers, payload):
    response = client.post("/employees", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide name, role, and salary"


@pytest.mark.parametrize("salary", [-1, "abc", True])
def test_create_employee_rejects_bad_salary(client, admin_headers, salary):
    response = client.post(
        "/employees", json={"name": "John", "role": "Coordinator", "salary": salary}, headers=admin_headers
    )

    assert response.status_code == 400


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": ["John"], "role": "Coordinator", "salary": 1000}, "name must be a string"),
        ({"name": "John", "role": 7, "salary": 1000}, "role must be a string"),
        ({"name": "John", "role": "Coordinator", "salary": 1000, "hireDate": 20240101}, "hireDate must be an ISO-8601 date"),
    ],
)
def test_create_employee_rejects_malformed_fields(client, admin_headers, payload, message):
    response = client.post("/employees", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == message


def test_update_employee(client, admin_headers, make_employee):
    employee_id = make_employee()

    response = client.put(
        f"/employees/{employee_id}",
        json={"name": "John Smith", "role": "Lead", "salary": 60000},
        headers=admin_headers,
    )

    assert response.status_code == 200
    employee = db.session.get(Employee, employee_id)
    assert employee.role == "Lead"
    assert float(employee.salary) == 60000


def test_update_missing_employee_is_404(client, admin_headers):
    response = client.put(
        "/employees/42", json={"name": "X", "role": "Y", "salary": 1}, headers=admin_headers
    )

    assert response.status_code == 404


def test_delete_employee_removes_assignments(client, admin_headers, make_employee, make_event):
    employee_id = make_employee()
    event_id = make_event()
    client.post(
        "/assignEvent",
        json={"employeeId": employee_id, "eventId": event_id, "role": "Usher"},
        headers=admin_headers,
    )

    response = client.delete(f"/employees/{employee_id}", headers=admin_headers)

    assert response.status_code == 200
    assert db.session.get(Employee, employee_id) is None
    assert Assignment.query.count() == 0
    assert client.delete(f"/employees/{employee_id}", headers=admin_headers).status_code == 404


def test_employee_routes_require_admin(client, auth_headers):
    _, headers = auth_headers()

    assert client.get("/employees").status_code == 401
    assert client.get("/employees", headers=headers).status_code == 403
    assert (
        client.post("/employees", json={"name": "X", "role": "Y", "salary": 1}, headers=headers).status_code
        == 403
    )
    assert client.delete("/employees/1", headers=headers).status_code == 403


def test_assign_employee_and_reject_duplicate(client, admin_headers, make_employee, make_event):
    employee_id = make_employee()
    event_id = make_event()
    payload = {"employeeId": employee_id, "eventId": event_id, "role": "Usher"}

    first = client.post("/assignEvent", json=payload, headers=admin_headers)
    second = client.post("/assignEvent", json={**payload, "role": "Host"}, headers=admin_headers)

    assert first.status_code == 201
    assert "assignId" in first.get_json()
    assert second.status_code == 400
    assert second.get_json()["message"] == "Employee is already assigned to this event"
    assert Assignment.query.count() == 1


def test_assign_requires_all_fields(client, admin_headers):
    response = client.post("/assignEvent", json={"employeeId": 1}, headers=admin_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide employeeId, eventId, and role"


def test_assign_unknown_employee_or_event_is_404(client, admin_headers, make_employee, make_event):
    employee_id = make_employee()
    event_id = make_event()

    missing_employee = client.post(
        "/assignEvent", json={"employeeId": 999, "eventId": event_id, "role": "Usher"}, headers=admin_headers
    )
    missing_event = client.post(
        "/assignEvent", json={"employeeId": employee_id, "eventId": 999, "role": "Usher"}, headers=admin_headers
    )

    assert missing_employee.status_code == 404
    assert missing_event.status_code == 404


def test_list_event_assignments(client, admin_headers, make_employee, make_event):
    employee_id = make_employee(name="Sarah")
    event_id = make_event()
    client.post(
        "/assignEvent",
        json={"employeeId": employee_id, "eventId": event_id, "role": "Usher"},
        headers=admin_headers,
    )

    response = client.get(f"/events/{event_id}/assignments", headers=admin_headers)

    assert response.status_code == 200
    [row] = response.get_json()
    assert row["role"] == "Usher"
    assert row["employee"]["name"] == "Sarah"
