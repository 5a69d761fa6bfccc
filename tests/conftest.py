import asyncio
import os

# Point the app at a throwaway store before any app module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

import pytest

from app.api.deps import get_context
from app.core.context import AppContext
from app.core.notifications import NotificationGuard
from app.core.session_store import SessionStore
from app.db.base import Base
from app.db.session import make_engine, make_session_factory
from app.main import app
from app.services.gateway import RemoteDataGateway


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def engine(tmp_path):
    """One fresh SQLite file per test; threads get their own connections."""
    engine = make_engine(f"sqlite:///{tmp_path / 'rh.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture()
def gateway(session_factory):
    return RemoteDataGateway(session_factory)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def notifications(clock):
    return NotificationGuard(timeout_seconds=5.0, clock=clock)


@pytest.fixture()
def session_store(tmp_path):
    return SessionStore(tmp_path / "session.json")


@pytest.fixture()
def ctx(gateway, notifications, session_store):
    context = AppContext(gateway, notifications, session_store)
    asyncio.run(context.startup())
    return context


@pytest.fixture(autouse=True)
def override_get_context(request):
    if "ctx" not in request.fixturenames:
        yield
        return

    context = request.getfixturevalue("ctx")
    app.dependency_overrides[get_context] = lambda: context
    yield
    app.dependency_overrides.clear()
