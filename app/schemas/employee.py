from datetime import date, datetime

from pydantic import BaseModel, Field

from app.models.enums import EmployeeStatus


class BankInfo(BaseModel):
    bank: str = ""
    agency: str = ""
    account: str = ""
    digit: str = ""


class DriverLicense(BaseModel):
    number: str = ""
    category: str = ""
    validity: str = ""


class Relative(BaseModel):
    name: str
    birth_date: date
    relationship: str = ""


class EmployeeFields(BaseModel):
    """Every mutable dossier field; all optional so the same set serves patches."""
    code: str | None = None
    receipt_number: str | None = None

    father_name: str | None = None
    mother_name: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    marital_status: str | None = None
    race: str | None = None
    naturalness: str | None = None
    nationality: str | None = None
    education: str | None = None

    address: str | None = None
    neighborhood: str | None = None
    zip_code: str | None = None
    city: str | None = None
    state: str | None = None
    phone: str | None = None
    emergency_phone: str | None = None

    cpf: str | None = None
    rg: str | None = None
    rg_issuer: str | None = None
    ctps: str | None = None
    pis: str | None = None
    voter_id: str | None = None
    cnh: DriverLicense | None = None

    bank_info: BankInfo | None = None
    pix_key: str | None = None

    admission_date: date | None = None
    role: str | None = None
    cbo: str | None = None
    salary: float | None = Field(default=None, ge=0)
    scale: str | None = None
    payment_mode: str | None = None
    payment_period: str | None = None
    fgts_optant: bool | None = None

    performance_rating: int | None = Field(default=None, ge=1, le=5)
    performance_notes: str | None = None

    relatives: list[Relative] | None = None


class EmployeeCreate(EmployeeFields):
    name: str = Field(min_length=1, max_length=200)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    fgts_optant: bool | None = True


class EmployeeUpdate(EmployeeFields):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    status: EmployeeStatus | None = None


class EmployeeStatusUpdate(BaseModel):
    status: EmployeeStatus


class EmployeeOut(EmployeeFields):
    id: str
    name: str
    status: str
    created_at: datetime | None = None

    # Display helpers (pt-BR)
    salary_display: str
    admission_date_display: str


class EmployeeListItem(BaseModel):
    id: str
    name: str
    cpf: str | None = None
    role: str | None = None
    status: str
    admission_date: date | None = None
