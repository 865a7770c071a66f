from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None


def require_month(value: Any, field_name: str) -> str:
    """Validate a YYYY-MM salary month."""
    value = str(value or "").strip()
    if not _MONTH_RE.match(value):
        raise ValidationError(f"{field_name} must be a YYYY-MM month")
    return value


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
