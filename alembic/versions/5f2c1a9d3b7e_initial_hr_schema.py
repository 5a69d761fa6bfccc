"""initial hr schema

Revision ID: 5f2c1a9d3b7e
Revises:
Create Date: 2026-10-18 09:12:40.118203
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "5f2c1a9d3b7e"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        _created_at(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("code", sa.String(50)),
        sa.Column("receipt_number", sa.String(50)),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("father_name", sa.String(200)),
        sa.Column("mother_name", sa.String(200)),
        sa.Column("birth_date", sa.Date()),
        sa.Column("gender", sa.String(30)),
        sa.Column("marital_status", sa.String(30)),
        sa.Column("race", sa.String(30)),
        sa.Column("naturalness", sa.String(100)),
        sa.Column("nationality", sa.String(100)),
        sa.Column("education", sa.String(100)),
        sa.Column("address", sa.String(300)),
        sa.Column("neighborhood", sa.String(100)),
        sa.Column("zip_code", sa.String(20)),
        sa.Column("city", sa.String(100)),
        sa.Column("state", sa.String(50)),
        sa.Column("phone", sa.String(30)),
        sa.Column("emergency_phone", sa.String(30)),
        sa.Column("cpf", sa.String(20), unique=True),
        sa.Column("rg", sa.String(30)),
        sa.Column("rg_issuer", sa.String(30)),
        sa.Column("ctps", sa.String(30)),
        sa.Column("pis", sa.String(30)),
        sa.Column("voter_id", sa.String(30)),
        sa.Column("cnh", sa.JSON()),
        sa.Column("bank_info", sa.JSON()),
        sa.Column("pix_key", sa.String(100)),
        sa.Column("admission_date", sa.Date()),
        sa.Column("role", sa.String(100)),
        sa.Column("cbo", sa.String(20)),
        sa.Column("salary", sa.Numeric(12, 2)),
        sa.Column("scale", sa.String(50)),
        sa.Column("payment_mode", sa.String(30)),
        sa.Column("payment_period", sa.String(30)),
        sa.Column("fgts_optant", sa.Boolean()),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("performance_rating", sa.Integer()),
        sa.Column("performance_notes", sa.Text()),
        sa.Column("relatives", sa.JSON()),
        _created_at(),
    )
    op.create_index("ix_employees_name", "employees", ["name"])

    op.create_table(
        "events",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "employee_id",
            sa.Uuid(),
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("justification", sa.Text()),
        sa.Column("severity", sa.String(20)),
        _created_at(),
    )
    op.create_index("ix_events_employee_id", "events", ["employee_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "employee_id",
            sa.Uuid(),
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("category", sa.String(30), nullable=False),
        sa.Column("upload_date", sa.Date(), nullable=False),
        sa.Column("file_url", sa.String(1000)),
        _created_at(),
    )
    op.create_index("ix_documents_employee_id", "documents", ["employee_id"])


def downgrade() -> None:
    op.drop_table("documents")
    op.drop_table("events")
    op.drop_table("employees")
    op.drop_table("users")
