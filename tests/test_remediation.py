from app.core.remediation import REMEDIATION_SCRIPT


def test_script_creates_every_table_idempotently():
    for table in ("users", "employees", "events", "documents"):
        assert f"CREATE TABLE IF NOT EXISTS {table} (" in REMEDIATION_SCRIPT


def test_script_adds_employee_columns_if_missing():
    for line in (
        "ALTER TABLE employees ADD COLUMN IF NOT EXISTS pix_key VARCHAR(100);",
        "ALTER TABLE employees ADD COLUMN IF NOT EXISTS bank_info JSON;",
        "ALTER TABLE employees ADD COLUMN IF NOT EXISTS relatives JSON;",
        "ALTER TABLE employees ADD COLUMN IF NOT EXISTS fgts_optant BOOLEAN;",
    ):
        assert line in REMEDIATION_SCRIPT


def test_script_never_drops_anything():
    assert "DROP" not in REMEDIATION_SCRIPT.upper()
    assert "ADD COLUMN id " not in REMEDIATION_SCRIPT


def test_script_gives_every_table_a_server_side_identity():
    assert REMEDIATION_SCRIPT.count("id UUID DEFAULT gen_random_uuid() NOT NULL") == 4
