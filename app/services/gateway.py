"""
Uniform access to the four record collections of the HR store.

Each call opens its own session, so independent calls may run in parallel
threads. Store failures never leave this module as SQLAlchemy exceptions:
they are converted into RemoteReadError / RemoteWriteError carrying the
driver message and, when available, the store error code.
"""

import logging
import uuid
from datetime import date, datetime
from typing import Any, Mapping

from sqlalchemy import Date, DateTime, Uuid, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.errors import GatewayError, RemoteReadError, RemoteWriteError, failure_code
from app.core.passwords import verify_password
from app.core.sanitizer import sanitize_payload, strip_identity
from app.db.base import Base
from app.models.document import Document
from app.models.employee import Employee
from app.models.event import OperationalEvent
from app.models.user import AppUser

logger = logging.getLogger(__name__)

COLLECTIONS: dict[str, type[Base]] = {
    "employees": Employee,
    "events": OperationalEvent,
    "documents": Document,
    "users": AppUser,
}

ORDERING = {
    # case-insensitive, matching the in-memory roster sort
    "employees": (func.lower(Employee.name).asc(), Employee.name.asc(), Employee.created_at.asc()),
    "events": (OperationalEvent.date.desc(), OperationalEvent.created_at.desc()),
    "documents": (Document.upload_date.desc(), Document.created_at.desc()),
    "users": (AppUser.name.asc(),),
}

# Never handed out with a row
HIDDEN_FIELDS = {
    "users": frozenset({"password_hash"}),
}


def _wrap(error_cls: type[GatewayError], exc: SQLAlchemyError) -> GatewayError:
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    return error_cls(message, code=failure_code(exc))


def _type_name(column_type) -> str:
    if isinstance(column_type, Uuid):
        return "uuid"
    if isinstance(column_type, DateTime):
        return "timestamp with time zone" if column_type.timezone else "timestamp"
    if isinstance(column_type, Date):
        return "date"
    return str(column_type).lower()


class RemoteDataGateway:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    # --- helpers -------------------------------------------------------------

    def _model(self, collection: str) -> type[Base]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None

    def _to_row(self, collection: str, obj: Base) -> dict[str, Any]:
        hidden = HIDDEN_FIELDS.get(collection, frozenset())
        row = {
            column.key: getattr(obj, column.key)
            for column in obj.__table__.columns
            if column.key not in hidden
        }
        # Null columns are reported as absent, same as on the way in
        return sanitize_payload(row)

    def _coerce(self, collection: str, payload: Mapping[str, Any], error_cls: type[GatewayError]) -> dict[str, Any]:
        """
        Match payload values to column types. Unknown fields are rejected the
        way the store rejects them: as an undefined column.
        """
        table = self._model(collection).__table__
        coerced = {}
        for key, value in payload.items():
            if key not in table.c:
                raise error_cls(
                    f'column "{key}" of relation "{table.name}" does not exist',
                    code="42703",
                )
            column_type = table.c[key].type
            try:
                if isinstance(column_type, Uuid) and not isinstance(value, uuid.UUID):
                    value = uuid.UUID(str(value))
                elif isinstance(column_type, DateTime) and isinstance(value, str):
                    value = datetime.fromisoformat(value)
                elif isinstance(column_type, Date) and isinstance(value, str):
                    value = date.fromisoformat(value[:10])
            except ValueError:
                # same wording as the store: names the type, not the column
                raise error_cls(
                    f'invalid input syntax for type {_type_name(column_type)}: "{value}"',
                    code="22P02",
                ) from None
            coerced[key] = value
        return coerced

    def _identity(self, collection: str, record_id: Any, error_cls: type[GatewayError]) -> uuid.UUID:
        return self._coerce(collection, {"id": record_id}, error_cls)["id"]

    # --- operations ----------------------------------------------------------

    def probe(self) -> bool:
        """Single-row read on employees. Any failure means unreachable."""
        try:
            with self._session_factory() as db:
                db.execute(select(Employee.id).limit(1)).first()
        except Exception:
            logger.warning("Database probe failed", exc_info=True)
            return False
        return True

    def fetch_all(self, collection: str, filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        model = self._model(collection)
        criteria = self._coerce(collection, filters or {}, RemoteReadError)

        query = select(model)
        for key, value in criteria.items():
            query = query.where(model.__table__.c[key] == value)
        query = query.order_by(*ORDERING[collection])

        try:
            with self._session_factory() as db:
                rows = db.execute(query).scalars().all()
                return [self._to_row(collection, obj) for obj in rows]
        except SQLAlchemyError as exc:
            logger.warning("Fetching %s failed: %s", collection, exc)
            raise _wrap(RemoteReadError, exc) from exc

    def fetch_one(self, collection: str, record_id: Any) -> dict[str, Any] | None:
        """Row by identity, or None. An id that is not a valid identity names no row."""
        model = self._model(collection)
        try:
            ident = self._identity(collection, record_id, RemoteReadError)
        except RemoteReadError:
            return None

        try:
            with self._session_factory() as db:
                obj = db.get(model, ident)
                return None if obj is None else self._to_row(collection, obj)
        except SQLAlchemyError as exc:
            logger.warning("Fetching %s row %s failed: %s", collection, ident, exc)
            raise _wrap(RemoteReadError, exc) from exc

    def create(self, collection: str, record: Mapping[str, Any]) -> dict[str, Any]:
        model = self._model(collection)
        payload = self._coerce(
            collection, sanitize_payload(strip_identity(record)), RemoteWriteError
        )

        try:
            with self._session_factory() as db:
                obj = model(**payload)
                db.add(obj)
                db.commit()
                db.refresh(obj)
                return self._to_row(collection, obj)
        except SQLAlchemyError as exc:
            logger.warning("Creating %s row failed: %s", collection, exc)
            raise _wrap(RemoteWriteError, exc) from exc

    def update(self, collection: str, record_id: Any, partial: Mapping[str, Any]) -> dict[str, Any]:
        model = self._model(collection)
        ident = self._identity(collection, record_id, RemoteWriteError)
        # the identity itself is immutable
        payload = self._coerce(
            collection, sanitize_payload(strip_identity(partial)), RemoteWriteError
        )

        try:
            with self._session_factory() as db:
                obj = db.get(model, ident)
                if obj is None:
                    raise RemoteWriteError(f"No {collection} row with id {ident}")
                for key, value in payload.items():
                    setattr(obj, key, value)
                db.commit()
                db.refresh(obj)
                return self._to_row(collection, obj)
        except SQLAlchemyError as exc:
            logger.warning("Updating %s row %s failed: %s", collection, ident, exc)
            raise _wrap(RemoteWriteError, exc) from exc

    def delete(self, collection: str, record_id: Any) -> None:
        """
        Dependent rows (events, documents of an employee) are removed by the
        store's ON DELETE CASCADE, not here.
        """
        model = self._model(collection)
        ident = self._identity(collection, record_id, RemoteWriteError)

        try:
            with self._session_factory() as db:
                db.execute(delete(model).where(model.id == ident))
                db.commit()
        except SQLAlchemyError as exc:
            logger.warning("Deleting %s row %s failed: %s", collection, ident, exc)
            raise _wrap(RemoteWriteError, exc) from exc

    def authenticate(self, email: str, password: str) -> dict[str, Any] | None:
        """Look the user up by email and check the bcrypt hash. Never raises."""
        try:
            with self._session_factory() as db:
                user = db.execute(
                    select(AppUser).where(AppUser.email == email)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.warning("Credential lookup failed: %s", exc)
            return None

        if user is None or not verify_password(password, user.password_hash):
            return None
        return self._to_row("users", user)
