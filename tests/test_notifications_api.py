from fastapi.testclient import TestClient
from sqlalchemy import text

from app.main import app
from app.models.employee import Employee
from tests.helpers import create_user, login


def drift_store(engine):
    """Replace employees with an older table that lacks most columns."""
    Employee.__table__.drop(engine)
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE employees ("
            "id CHAR(32) PRIMARY KEY, name VARCHAR(200) NOT NULL, "
            "status VARCHAR(20) NOT NULL, created_at DATETIME NOT NULL)"
        ))


def test_no_notification_initially(ctx):
    r = TestClient(app).get("/notifications/current")
    assert r.status_code == 200
    assert r.json() is None


def test_schema_drift_surfaces_remediation(ctx, session_factory, engine, clock):
    create_user(session_factory, "admin@x.com")
    client = TestClient(app)
    login(client, "admin@x.com")
    drift_store(engine)

    r = client.post("/employees", json={"name": "Ana", "pix_key": "ana@pix"})
    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["blocking"] is True
    assert "ALTER TABLE employees ADD COLUMN IF NOT EXISTS pix_key" in detail["remediation_script"]

    # blocking notifications outlive the timeout
    clock.advance(120)
    current = client.get("/notifications/current").json()
    assert current["blocking"] is True

    r = client.get("/notifications/remediation")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert "NOTIFY pgrst, 'reload schema';" in r.text

    assert client.post("/notifications/dismiss").status_code == 200
    assert client.get("/notifications/current").json() is None
    assert client.get("/notifications/remediation").status_code == 404


def test_success_notification_expires(ctx, session_factory, clock):
    create_user(session_factory, "admin@x.com", name="Admin")
    client = TestClient(app)
    login(client, "admin@x.com")

    current = client.get("/notifications/current").json()
    assert current == {"kind": "success", "text": "Welcome, Admin", "blocking": False, "remediation_script": None}

    clock.advance(5)
    assert client.get("/notifications/current").json() is None


def test_remediation_on_demand(ctx):
    client = TestClient(app)
    assert client.get("/notifications/remediation").status_code == 404
    r = client.get("/notifications/remediation", params={"always": True})
    assert r.status_code == 200
    assert "CREATE TABLE IF NOT EXISTS employees" in r.text
