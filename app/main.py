from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.auth import router as auth_router
from app.api.dashboard import router as dashboard_router
from app.api.documents import router as documents_router
from app.api.employees import router as employees_router
from app.api.events import router as events_router
from app.api.health import router as health_router
from app.api.notifications import router as notifications_router
from app.api.root import router as root_router
from app.core.config import settings
from app.core.context import AppContext
from app.core.logging_config import setup_logging
from app.core.notifications import NotificationGuard
from app.core.session_store import SessionStore
from app.db.session import SessionLocal
from app.services.gateway import RemoteDataGateway


def build_context(session_factory=SessionLocal) -> AppContext:
    return AppContext(
        gateway=RemoteDataGateway(session_factory),
        notifications=NotificationGuard(timeout_seconds=settings.NOTIFICATION_TIMEOUT_SECONDS),
        session_store=SessionStore(settings.SESSION_FILE, key=settings.SESSION_KEY),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    context = build_context()
    # restore the saved session, probe the store, load the roster
    await context.startup()
    app.state.context = context
    yield


app = FastAPI(title="Gourmetto RH", lifespan=lifespan)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(employees_router)
app.include_router(events_router)
app.include_router(documents_router)
app.include_router(notifications_router)
