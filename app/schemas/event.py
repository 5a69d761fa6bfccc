import datetime as dt
import uuid

from pydantic import BaseModel, Field

from app.models.enums import EventSeverity, EventType


class EventCreate(BaseModel):
    employee_id: uuid.UUID
    type: EventType
    date: dt.date = Field(default_factory=dt.date.today)
    description: str = ""
    justification: str | None = None
    severity: EventSeverity | None = None


class EventUpdate(BaseModel):
    type: EventType | None = None
    date: dt.date | None = None
    description: str | None = None
    justification: str | None = None
    severity: EventSeverity | None = None


class EventOut(BaseModel):
    id: str
    employee_id: str
    type: str
    date: dt.date
    description: str | None = None
    justification: str | None = None
    severity: str | None = None
    created_at: dt.datetime | None = None
