"""
Idempotent repair script offered to the operator when a write fails because
the store is missing a table or column.

The script is rendered from the model metadata, so it always lists exactly the
columns the gateway writes.
"""

from sqlalchemy import DefaultClause, MetaData, Table, Uuid, text
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from app.db.base import Base

_dialect = postgresql.dialect()

TABLE_ORDER = ("users", "employees", "events", "documents")


def _with_server_identity() -> MetaData:
    """
    Copy of the model metadata where uuid keys default on the server side, so
    rows inserted by other clients of the store also get an identity.
    """
    metadata = MetaData()
    for table in Base.metadata.sorted_tables:
        copy = table.to_metadata(metadata)
        for column in copy.primary_key.columns:
            if isinstance(column.type, Uuid):
                column.server_default = DefaultClause(text("gen_random_uuid()"))
    return metadata


def _create_table(table: Table) -> str:
    ddl = str(CreateTable(table, if_not_exists=True).compile(dialect=_dialect)).strip()
    return f"{ddl};"


def _add_missing_columns(table: Table) -> list[str]:
    quote = _dialect.identifier_preparer.quote
    lines = []
    for column in table.columns:
        if column.primary_key:
            continue
        # Added as nullable: NOT NULL would fail on a table that already has rows
        line = (
            f"ALTER TABLE {quote(table.name)} ADD COLUMN IF NOT EXISTS "
            f"{quote(column.name)} {column.type.compile(dialect=_dialect)}"
        )
        if column.server_default is not None:
            default = column.server_default.arg
            if isinstance(default, str):
                line += f" DEFAULT '{default}'"
            else:
                line += f" DEFAULT {default.compile(dialect=_dialect)}"
        lines.append(f"{line};")
    return lines


def build_remediation_script() -> str:
    tables = _with_server_identity().tables
    parts = [
        "-- Gourmetto RH: idempotent schema repair.",
        "-- Safe to run more than once.",
        "",
    ]
    for name in TABLE_ORDER:
        parts.append(_create_table(tables[name]))
        parts.append("")

    parts.extend(_add_missing_columns(tables["employees"]))
    parts.append("")

    # Lets a PostgREST front end pick up the new columns without a restart
    parts.append("NOTIFY pgrst, 'reload schema';")
    return "\n".join(parts) + "\n"


REMEDIATION_SCRIPT = build_remediation_script()
