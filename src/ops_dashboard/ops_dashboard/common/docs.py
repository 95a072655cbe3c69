from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def as_number(value: Any) -> float | int:
    """Lenient numeric coercion for stored amounts; unparseable values count as 0."""
    if value is None or value == "":
        return 0
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0
    if num != num:  # NaN
        return 0
    return int(num) if num.is_integer() else num


def opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value or None


def opt_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def iso_or_none(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
