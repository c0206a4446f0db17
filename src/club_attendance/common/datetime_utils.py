from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value, field_name: str = "date") -> date:
    """Accept a date or an ISO string; raise ValidationError otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Invalid {field_name}", [f"{field_name}: expected a YYYY-MM-DD date"])


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now().date()
