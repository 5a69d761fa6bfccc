from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for the HR tables: users, employees, events, documents."""


def utcnow() -> datetime:
    # aware value for DateTime(timezone=True) columns
    return datetime.now(timezone.utc)


# Import models so Alembic and create_all see every table
from app.models import *  # noqa
