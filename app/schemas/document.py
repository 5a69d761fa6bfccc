import uuid
from datetime import date

from pydantic import BaseModel, Field

from app.models.enums import DocumentCategory


class DocumentCreate(BaseModel):
    employee_id: uuid.UUID
    title: str = Field(min_length=1, max_length=200)
    category: DocumentCategory = DocumentCategory.OTHER
    upload_date: date = Field(default_factory=date.today)
    file_url: str | None = None


class DocumentOut(BaseModel):
    id: str
    employee_id: str
    title: str
    category: str
    upload_date: date
    file_url: str | None = None
