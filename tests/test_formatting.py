from datetime import date

from app.core.formatting import format_brl, format_date_br


def test_format_brl():
    assert format_brl(1234.5) == "R$ 1.234,50"
    assert format_brl(0) == "R$ 0,00"
    assert format_brl("2500") == "R$ 2.500,00"
    assert format_brl(1234567.891) == "R$ 1.234.567,89"
    assert format_brl(-10) == "-R$ 10,00"


def test_format_brl_non_numeric_is_zero():
    assert format_brl(None) == "R$ 0,00"
    assert format_brl("abc") == "R$ 0,00"
    assert format_brl(float("nan")) == "R$ 0,00"


def test_format_date_br():
    assert format_date_br("2024-03-05") == "05/03/2024"
    assert format_date_br(date(2023, 12, 31)) == "31/12/2023"
    assert format_date_br(None) == ""
    assert format_date_br("not a date") == ""
