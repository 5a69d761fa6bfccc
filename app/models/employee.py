import uuid
from datetime import date, datetime

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, utcnow
from app.models.enums import EmployeeStatus


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Internal bookkeeping
    code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    receipt_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Identity
    name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    father_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    mother_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(30), nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(30), nullable=True)
    race: Mapped[str | None] = mapped_column(String(30), nullable=True)
    naturalness: Mapped[str | None] = mapped_column(String(100), nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    education: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Address and contact
    address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    neighborhood: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    emergency_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)

    # Brazilian documents
    cpf: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)
    rg: Mapped[str | None] = mapped_column(String(30), nullable=True)
    rg_issuer: Mapped[str | None] = mapped_column(String(30), nullable=True)
    ctps: Mapped[str | None] = mapped_column(String(30), nullable=True)
    pis: Mapped[str | None] = mapped_column(String(30), nullable=True)
    voter_id: Mapped[str | None] = mapped_column(String(30), nullable=True)
    cnh: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # Financial
    bank_info: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    pix_key: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Contract terms
    admission_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cbo: Mapped[str | None] = mapped_column(String(20), nullable=True)
    salary: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    scale: Mapped[str | None] = mapped_column(String(50), nullable=True)
    payment_mode: Mapped[str | None] = mapped_column(String(30), nullable=True)
    payment_period: Mapped[str | None] = mapped_column(String(30), nullable=True)
    fgts_optant: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EmployeeStatus.ACTIVE.value
    )

    performance_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    performance_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Ordered list of {name, birth_date, relationship}
    relatives: Mapped[list | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
        server_default=sa.func.now(),
    )
