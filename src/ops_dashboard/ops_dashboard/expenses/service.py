from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, to_iso_date
from ..common.validators import parse_amount
from ..core.exceptions import ValidationError
from ..payroll.calculator.base import SalaryCalculator
from ..reports.aggregates import DailySummary, daily_summary
from ..works.repository import PendingWorkRepository
from .repository import ExpenseRepository


def complete_entries(entries: Sequence[Mapping[str, Any]]) -> list[dict]:
    """Keep entries that have both a positive amount and a description."""
    out = []
    for e in entries:
        description = str(e.get("description") or "").strip()
        try:
            amount = parse_amount(e.get("amount"), "Amount", default=0)
        except ValidationError:
            continue
        if description and amount > 0:
            out.append({"amount": int(amount) if amount.is_integer() else amount, "description": description})
    return out


class ExpenseService:
    """Use case: other-cost ledger and the daily profit view built on it."""

    def __init__(
        self,
        expenses: ExpenseRepository,
        works: PendingWorkRepository,
        attendance: AttendanceRepository,
        *,
        calculator: SalaryCalculator,
    ):
        self._expenses = expenses
        self._works = works
        self._attendance = attendance
        self._calculator = calculator

    def save(self, *, day: Optional[date], entries: Sequence[Mapping[str, Any]]) -> list[str]:
        valid = complete_entries(entries)
        if not valid:
            raise ValidationError("Please fill amount and description for at least one expense")
        day_s = to_iso_date(day or now_local().date())
        return [self._expenses.add({**e, "date": day_s}) for e in valid]

    def daily_summary(self, *, day: Optional[date] = None) -> DailySummary:
        return daily_summary(
            day=day or now_local().date(),
            works=self._works.list_all(),
            attendance=self._attendance.list_all(),
            expenses=self._expenses.list_all(),
            calculator=self._calculator,
        )
