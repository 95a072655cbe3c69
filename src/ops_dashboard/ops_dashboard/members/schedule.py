from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import add_months, parse_iso_date, to_iso_date

_DURATION_RE = re.compile(r"^\s*(\d+)\s*(days?|months?)\s*$", re.IGNORECASE)


def parse_duration(value: Optional[str]) -> Optional[tuple[int, str]]:
    """``"30days"`` -> ``(30, "day")``, ``"3month"`` -> ``(3, "month")``; anything else -> None."""
    if not value:
        return None
    m = _DURATION_RE.match(value)
    if not m:
        return None
    unit = m.group(2).lower().rstrip("s")
    return int(m.group(1)), unit


def next_due_date(join_date: str, duration: Optional[str]) -> Optional[date]:
    parsed = parse_duration(duration)
    if not parsed or not join_date:
        return None
    try:
        start = parse_iso_date(join_date)
    except ValueError:
        return None
    n, unit = parsed
    if unit == "day":
        return start + timedelta(days=n)
    return add_months(start, n)


@dataclass(frozen=True)
class MemberSchedule:
    next_date: Optional[date]
    days_remaining: Optional[int]

    @property
    def is_work_day(self) -> bool:
        return self.days_remaining == 0

    @property
    def is_overdue(self) -> bool:
        return self.days_remaining is not None and self.days_remaining < 0

    def to_dict(self) -> dict:
        return {
            "nextDate": to_iso_date(self.next_date) if self.next_date else None,
            "daysRemaining": self.days_remaining,
            "isWorkDay": self.is_work_day,
            "isOverdue": self.is_overdue,
        }


def member_schedule(join_date: str, duration: Optional[str], *, today: date) -> MemberSchedule:
    nxt = next_due_date(join_date, duration)
    if nxt is None:
        return MemberSchedule(next_date=None, days_remaining=None)
    return MemberSchedule(next_date=nxt, days_remaining=(nxt - today).days)
