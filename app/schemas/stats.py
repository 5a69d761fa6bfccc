from pydantic import BaseModel

from app.schemas.event import EventOut


class RecentEventOut(EventOut):
    employee_name: str


class DashboardStats(BaseModel):
    """Roster summary shown on the landing panel"""
    active_employees: int = 0
    inactive_employees: int = 0  # on leave + terminated
    total_employees: int = 0
    registered_events: int = 0
    recent_events: list[RecentEventOut] = []
