from datetime import timezone

import pytest

from app.db.base import Base, utcnow


def test_utcnow_is_timezone_aware():
    assert utcnow().tzinfo is timezone.utc


@pytest.mark.parametrize("table", ["users", "employees", "events", "documents"])
def test_created_at_defaults_to_aware_timestamp(table):
    default = Base.metadata.tables[table].c.created_at.default
    assert default.is_callable
    assert default.arg(None).tzinfo is timezone.utc
