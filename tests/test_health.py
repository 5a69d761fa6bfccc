from fastapi.testclient import TestClient

from app.main import app
from app.models.employee import Employee
from tests.helpers import create_employee


def test_root_endpoint():
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Gourmetto RH"
    assert data["status"] == "ok"
    assert "docs" in data
    assert "health" in data


def test_health_ok(ctx):
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "online", "session": "online"}


def test_health_degraded_keeps_session_state(ctx, engine):
    Employee.__table__.drop(engine)
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert body["database"] == "offline"
    # a ping is not a reconnect
    assert body["session"] == "online"


def test_sync_picks_up_new_rows(ctx, session_factory):
    create_employee(session_factory, "Ana")
    client = TestClient(app)

    r = client.post("/sync")
    assert r.status_code == 200
    assert r.json()["employees"] == 1
    assert ctx.employees[0]["name"] == "Ana"


def test_sync_goes_offline_when_store_is_gone(ctx, engine):
    Employee.__table__.drop(engine)
    client = TestClient(app)

    r = client.post("/sync")
    assert r.json()["status"] == "offline"
    assert ctx.is_online is False
