import uuid

from fastapi.testclient import TestClient

from app.main import app
from tests.helpers import create_employee, create_user, login


def setup_client(session_factory):
    create_user(session_factory, "admin@x.com")
    ana = create_employee(session_factory, "Ana")
    client = TestClient(app)
    login(client, "admin@x.com")
    return client, ana


def test_create_event(ctx, session_factory):
    client, ana = setup_client(session_factory)

    r = client.post("/events", json={
        "employee_id": str(ana.id),
        "type": "Advertência",
        "date": "2024-04-10",
        "description": "Atraso recorrente",
        "severity": "Grave",
    })
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["employee_id"] == str(ana.id)
    assert body["severity"] == "Grave"
    assert body["justification"] is None


def test_event_for_unknown_employee(ctx, session_factory):
    client, _ = setup_client(session_factory)
    r = client.post("/events", json={"employee_id": str(uuid.uuid4()), "type": "Falta"})
    assert r.status_code == 404


def test_event_type_is_validated(ctx, session_factory):
    client, ana = setup_client(session_factory)
    r = client.post("/events", json={"employee_id": str(ana.id), "type": "Ferias"})
    assert r.status_code == 422


def test_events_listed_newest_first(ctx, session_factory):
    client, ana = setup_client(session_factory)
    for day in ["2024-01-05", "2024-03-05", "2024-02-05"]:
        client.post("/events", json={"employee_id": str(ana.id), "type": "Falta", "date": day})

    r = client.get(f"/employees/{ana.id}/events")
    assert [ev["date"] for ev in r.json()] == ["2024-03-05", "2024-02-05", "2024-01-05"]


def test_update_and_delete_event(ctx, session_factory):
    client, ana = setup_client(session_factory)
    ev = client.post("/events", json={"employee_id": str(ana.id), "type": "Falta"}).json()

    r = client.put(f"/events/{ev['id']}", json={"justification": "Atestado médico"})
    assert r.status_code == 200
    assert r.json()["justification"] == "Atestado médico"
    assert r.json()["type"] == "Falta"

    assert client.delete(f"/events/{ev['id']}").status_code == 204
    assert client.get(f"/employees/{ana.id}/events").json() == []


def test_unknown_event_is_not_found(ctx, session_factory):
    client, _ = setup_client(session_factory)
    missing = uuid.uuid4()

    assert client.put(f"/events/{missing}", json={"description": "x"}).status_code == 404
    assert client.delete(f"/events/{missing}").status_code == 404
    assert client.delete("/events/not-a-uuid").status_code == 404
    # nothing was attempted, so nothing to report
    assert ctx.notifications.current.text == "Welcome, Admin"
