from __future__ import annotations

import calendar
from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def month_key(value: date) -> str:
    """yyyy-MM prefix used to match date strings of a month."""
    return value.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def local_date_of(value: datetime) -> date:
    """Calendar date of a stored timestamp in local time.

    Timezone-aware values (as returned by the store) are converted to the
    local zone first; naive values are taken as already local.
    """
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def add_months(value: date, months: int) -> date:
    """Calendar month arithmetic, clamping the day to the target month's length."""
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_in_month(year: int, month: int) -> list[date]:
    return [date(year, month, d) for d in range(1, calendar.monthrange(year, month)[1] + 1)]
