from datetime import date

from fastapi.testclient import TestClient

from app.main import app
from tests.helpers import create_employee, create_event, create_user, login


def test_dashboard_counts(ctx, session_factory):
    create_user(session_factory, "admin@x.com")
    ana = create_employee(session_factory, "Ana")
    create_employee(session_factory, "Bruno", status="Afastado")
    create_employee(session_factory, "Carla", status="Desligado")
    create_event(session_factory, ana, type="Elogio", on=date(2024, 6, 1))
    create_event(session_factory, ana, type="Falta", on=date(2024, 5, 1))

    client = TestClient(app)
    login(client, "admin@x.com")
    r = client.get("/dashboard")
    assert r.status_code == 200
    stats = r.json()
    assert stats["active_employees"] == 1
    assert stats["inactive_employees"] == 2
    assert stats["total_employees"] == 3
    assert stats["registered_events"] == 2
    assert [ev["type"] for ev in stats["recent_events"]] == ["Elogio", "Falta"]
    assert stats["recent_events"][0]["employee_name"] == "Ana"


def test_dashboard_requires_session(ctx):
    assert TestClient(app).get("/dashboard").status_code == 401
