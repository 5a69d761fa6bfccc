"""
Application context: the operator session and the in-memory roster, mutated
only through the action coroutines below.

Every action is an operator boundary. Gateway failures are caught here and
turned into a notification; callers get the saved row back, or None when the
action failed.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable

from starlette.concurrency import run_in_threadpool

from app.core.errors import GatewayError
from app.core.notifications import NotificationGuard, NotificationKind
from app.core.passwords import hash_password
from app.core.session_store import SessionStore
from app.models.enums import EmployeeStatus
from app.services.gateway import RemoteDataGateway

logger = logging.getLogger(__name__)

# Status filter values meaning "no filter"
ALL_STATUSES = frozenset({"", "all", "Todos", "Todos Status"})

REMOVED_EMPLOYEE_NAME = "Removed employee"


class DbStatus(str, Enum):
    CHECKING = "checking"
    ONLINE = "online"
    OFFLINE = "offline"


def _same_id(a: Any, b: Any) -> bool:
    return a is not None and b is not None and str(a) == str(b)


def _roster_key(employee: dict[str, Any]) -> tuple[str, str]:
    name = str(employee.get("name", ""))
    return name.casefold(), name


def _session_record(user: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(user["id"]),
        "name": user.get("name", ""),
        "email": user.get("email", ""),
        "role": user.get("role", ""),
    }


class AppContext:
    def __init__(
        self,
        gateway: RemoteDataGateway,
        notifications: NotificationGuard,
        session_store: SessionStore,
    ):
        self.gateway = gateway
        self.notifications = notifications
        self.session_store = session_store

        self.current_user: dict[str, Any] | None = None
        self.employees: list[dict[str, Any]] = []
        self.events: list[dict[str, Any]] = []
        self.db_status = DbStatus.CHECKING
        self.is_loading = True

    @property
    def is_online(self) -> bool:
        return self.db_status is DbStatus.ONLINE

    async def _call(self, fn: Callable, *args):
        return await run_in_threadpool(fn, *args)

    async def _write(self, fn: Callable, *args, success: str) -> tuple[bool, Any]:
        if not self.is_online:
            self.notifications.notify(
                NotificationKind.ERROR, "Database offline: changes cannot be saved."
            )
            return False, None
        try:
            result = await self._call(fn, *args)
        except GatewayError as exc:
            self.notifications.notify_failure(exc)
            return False, None
        self.notifications.success(success)
        return True, result

    # --- lifecycle -----------------------------------------------------------

    async def startup(self) -> None:
        self.current_user = self.session_store.load()
        await self.refresh()

    async def refresh(self) -> bool:
        """Probe the store; load everything when it answers."""
        self.db_status = DbStatus.CHECKING
        self.is_loading = True

        online = await self._call(self.gateway.probe)
        self.db_status = DbStatus.ONLINE if online else DbStatus.OFFLINE
        if not online:
            logger.warning("Store unreachable, starting offline")
            self.is_loading = False
            return False
        return await self.load_all_data()

    async def load_all_data(self) -> bool:
        """
        Employees and events are fetched in parallel and applied together.
        If either fetch fails nothing is applied and the context goes offline.
        """
        self.is_loading = True
        try:
            employees, events = await asyncio.gather(
                self._call(self.gateway.fetch_all, "employees"),
                self._call(self.gateway.fetch_all, "events"),
            )
        except GatewayError as exc:
            self.notifications.notify_failure(exc, prefix="Sync error: ")
            self.db_status = DbStatus.OFFLINE
            return False
        finally:
            self.is_loading = False

        self.employees = employees
        self.events = events
        return True

    # --- session -------------------------------------------------------------

    async def login(self, email: str, password: str) -> dict[str, Any] | None:
        user = await self._call(self.gateway.authenticate, email, password)
        if user is None:
            self.notifications.notify(
                NotificationKind.ERROR, "Invalid credentials or connection error."
            )
            return None

        self.current_user = _session_record(user)
        self.session_store.save(self.current_user)
        self.notifications.success(f"Welcome, {self.current_user['name']}")
        await self.load_all_data()
        return self.current_user

    def logout(self) -> None:
        self.current_user = None
        self.session_store.clear()
        self.employees = []
        self.events = []

    async def register_user(self, name: str, email: str, password: str, role: str) -> dict[str, Any] | None:
        record = {
            "name": name,
            "email": email,
            "password_hash": hash_password(password),
            "role": role,
        }
        _, saved = await self._write(
            self.gateway.create, "users", record, success="User registered."
        )
        return saved

    # --- employees -----------------------------------------------------------

    def get_employee(self, employee_id: Any) -> dict[str, Any] | None:
        return next((e for e in self.employees if _same_id(e.get("id"), employee_id)), None)

    def filter_employees(self, search: str | None = None, status: str | None = None) -> list[dict[str, Any]]:
        """Name matches case-insensitively, CPF as typed; status by equality."""
        term = (search or "").strip()
        status = status or ""

        def matches(employee: dict[str, Any]) -> bool:
            name_match = term.lower() in str(employee.get("name", "")).lower()
            cpf_match = term in str(employee.get("cpf", ""))
            status_match = status in ALL_STATUSES or employee.get("status") == status
            return (name_match or cpf_match) and status_match

        return [e for e in self.employees if matches(e)]

    def _replace_employee(self, saved: dict[str, Any]) -> None:
        self.employees = [saved if _same_id(e.get("id"), saved["id"]) else e for e in self.employees]

    async def create_employee(self, record: dict[str, Any]) -> dict[str, Any] | None:
        ok, saved = await self._write(
            self.gateway.create, "employees", record, success="Employee registered."
        )
        if ok:
            self.employees.append(saved)
            self.employees.sort(key=_roster_key)
        return saved

    async def update_employee(self, employee_id: Any, changes: dict[str, Any]) -> dict[str, Any] | None:
        ok, saved = await self._write(
            self.gateway.update, "employees", employee_id, changes,
            success="Employee record updated.",
        )
        if ok:
            self._replace_employee(saved)
        return saved

    async def update_employee_status(self, employee_id: Any, status: EmployeeStatus | str) -> dict[str, Any] | None:
        status = EmployeeStatus(status)
        ok, saved = await self._write(
            self.gateway.update, "employees", employee_id, {"status": status.value},
            success=f"Status changed to {status.value}",
        )
        if ok:
            self._replace_employee(saved)
        return saved

    async def delete_employee(self, employee_id: Any, confirmed: bool = False) -> bool:
        if not confirmed:
            self.notifications.notify(
                NotificationKind.ERROR, "Deletion must be confirmed; it cannot be undone."
            )
            return False

        ok, _ = await self._write(
            self.gateway.delete, "employees", employee_id,
            success="Employee removed from the database.",
        )
        if ok:
            # the store already dropped the dependent events
            self.employees = [e for e in self.employees if not _same_id(e.get("id"), employee_id)]
            self.events = [ev for ev in self.events if not _same_id(ev.get("employee_id"), employee_id)]
        return ok

    # --- events --------------------------------------------------------------

    def get_event(self, event_id: Any) -> dict[str, Any] | None:
        return next((ev for ev in self.events if _same_id(ev.get("id"), event_id)), None)

    def events_for(self, employee_id: Any) -> list[dict[str, Any]]:
        return [ev for ev in self.events if _same_id(ev.get("employee_id"), employee_id)]

    def _sort_events(self) -> None:
        # newest first; stable, so a fresh event leads its day
        self.events.sort(key=lambda ev: str(ev.get("date", "")), reverse=True)

    async def add_event(self, record: dict[str, Any]) -> dict[str, Any] | None:
        ok, saved = await self._write(
            self.gateway.create, "events", record, success="Operational event recorded."
        )
        if ok:
            self.events.insert(0, saved)
            self._sort_events()
        return saved

    async def update_event(self, event_id: Any, changes: dict[str, Any]) -> dict[str, Any] | None:
        ok, saved = await self._write(
            self.gateway.update, "events", event_id, changes, success="Event updated."
        )
        if ok:
            self.events = [saved if _same_id(ev.get("id"), event_id) else ev for ev in self.events]
            self._sort_events()
        return saved

    async def delete_event(self, event_id: Any) -> bool:
        ok, _ = await self._write(
            self.gateway.delete, "events", event_id, success="Event removed."
        )
        if ok:
            self.events = [ev for ev in self.events if not _same_id(ev.get("id"), event_id)]
        return ok

    # --- documents -----------------------------------------------------------

    async def list_documents(self, employee_id: Any) -> list[dict[str, Any]] | None:
        try:
            return await self._call(
                self.gateway.fetch_all, "documents", {"employee_id": employee_id}
            )
        except GatewayError as exc:
            self.notifications.notify_failure(exc)
            return None

    async def document_exists(self, document_id: Any) -> bool | None:
        """None when the store could not be asked (already notified)."""
        try:
            row = await self._call(self.gateway.fetch_one, "documents", document_id)
        except GatewayError as exc:
            self.notifications.notify_failure(exc)
            return None
        return row is not None

    async def add_document(self, record: dict[str, Any]) -> dict[str, Any] | None:
        _, saved = await self._write(
            self.gateway.create, "documents", record, success="Document attached."
        )
        return saved

    async def delete_document(self, document_id: Any) -> bool:
        ok, _ = await self._write(
            self.gateway.delete, "documents", document_id, success="Document removed."
        )
        return ok

    # --- dashboard -----------------------------------------------------------

    def dashboard(self, recent: int = 5) -> dict[str, Any]:
        total = len(self.employees)
        active = sum(1 for e in self.employees if e.get("status") == EmployeeStatus.ACTIVE.value)
        names = {str(e.get("id")): e.get("name", "") for e in self.employees}
        return {
            "active_employees": active,
            "inactive_employees": total - active,
            "total_employees": total,
            "registered_events": len(self.events),
            "recent_events": [
                {**ev, "employee_name": names.get(str(ev.get("employee_id")), REMOVED_EMPLOYEE_NAME)}
                for ev in self.events[:recent]
            ],
        }
