import asyncio
from datetime import date

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core.context import AppContext
from app.core.passwords import hash_password
from app.models.employee import Employee
from app.models.enums import UserRole
from app.models.event import OperationalEvent
from app.models.user import AppUser


def create_user(
    session_factory: sessionmaker,
    email: str,
    password: str = "123",
    name: str = "Admin",
    role: str = UserRole.MANAGER.value,
) -> AppUser:
    with session_factory() as db:
        u = AppUser(name=name, email=email, password_hash=hash_password(password), role=role)
        db.add(u)
        db.commit()
        db.refresh(u)
        return u


def create_employee(session_factory: sessionmaker, name: str, **fields) -> Employee:
    with session_factory() as db:
        e = Employee(name=name, **fields)
        db.add(e)
        db.commit()
        db.refresh(e)
        return e


def create_event(
    session_factory: sessionmaker,
    employee: Employee,
    type: str = "Falta",
    on: date | None = None,
    description: str = "",
) -> OperationalEvent:
    with session_factory() as db:
        ev = OperationalEvent(
            employee_id=employee.id,
            type=type,
            date=on or date.today(),
            description=description,
        )
        db.add(ev)
        db.commit()
        db.refresh(ev)
        return ev


def reload(ctx: AppContext) -> None:
    """Pick up rows written straight to the store."""
    assert asyncio.run(ctx.load_all_data())


def login(client: TestClient, email: str, password: str = "123"):
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()
