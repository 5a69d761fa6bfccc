from datetime import date, datetime
from typing import Any


def format_brl(value: Any) -> str:
    """Brazilian real, e.g. 1234.5 -> 'R$ 1.234,50'. Non-numbers show as zero."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0.0
    if number != number:  # NaN
        number = 0.0

    # 1,234.50 -> 1.234,50
    text = f"{abs(number):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if number < 0 else ""
    return f"{sign}R$ {text}"


def format_date_br(value: Any) -> str:
    """ISO date (or date object) -> 'dd/mm/yyyy'; blank when missing or unparseable."""
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        try:
            value = date.fromisoformat(str(value)[:10])
        except ValueError:
            return ""
    return value.strftime("%d/%m/%Y")
