"""Pure aggregate calculators over already-loaded records.

Nothing here touches the store; results depend only on the inputs and the
reference date passed in.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import local_date_of, month_key, to_iso_date
from ..core.enums import AttendanceStatus, WorkStatus
from ..expenses.model import OtherExpense
from ..payroll.calculator.base import SalaryCalculator
from ..works.model import PendingWork

T = TypeVar("T")


def on_date(
    items: Iterable[T],
    day: date,
    *,
    date_of: Callable[[T], str] = lambda r: getattr(r, "date", ""),
    created_of: Callable[[T], Optional[datetime]] = lambda r: getattr(r, "created_at", None),
) -> list[T]:
    """Records dated ``day``; undated records fall back to their local creation date."""
    target = to_iso_date(day)
    out = []
    for item in items:
        value = date_of(item)
        if value:
            if value == target:
                out.append(item)
            continue
        created = created_of(item)
        if created is not None and local_date_of(created) == day:
            out.append(item)
    return out


def in_month(items: Iterable[T], day: date, *, date_of: Callable[[T], str] = lambda r: getattr(r, "date", "")) -> list[T]:
    prefix = month_key(day)
    return [i for i in items if (date_of(i) or "").startswith(prefix)]


def completed_revenue(works: Iterable[PendingWork]) -> float:
    return sum(w.estimated_cost for w in works if w.status == WorkStatus.COMPLETED)


def revenue_for_date(works: Sequence[PendingWork], day: date) -> float:
    return completed_revenue(on_date(works, day))


def salary_total(records: Iterable[AttendanceRecord], calculator: SalaryCalculator) -> float:
    return sum(calculator.amount_for(r.status) for r in records)


def worker_salary_for_date(records: Sequence[AttendanceRecord], day: date, calculator: SalaryCalculator) -> float:
    target = to_iso_date(day)
    return salary_total((r for r in records if r.date == target), calculator)


def worker_count_for_date(records: Sequence[AttendanceRecord], day: date) -> int:
    target = to_iso_date(day)
    return sum(
        1
        for r in records
        if r.date == target and r.status in (AttendanceStatus.PRESENT, AttendanceStatus.HALF_DAY)
    )


def expenses_for_date(expenses: Sequence[OtherExpense], day: date) -> float:
    target = to_iso_date(day)
    return sum(e.amount for e in expenses if e.date == target)


def expenses_for_month(expenses: Sequence[OtherExpense], day: date) -> float:
    return sum(e.amount for e in in_month(expenses, day))


@dataclass(frozen=True)
class DailySummary:
    date: str
    works_count: int
    completed_count: int
    revenue: float
    worker_salary: float
    worker_count: int
    expenses: float
    month_expenses: float

    @property
    def profit(self) -> float:
        return self.revenue - self.worker_salary - self.expenses

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "worksCount": self.works_count,
            "completedCount": self.completed_count,
            "revenue": self.revenue,
            "workerSalary": self.worker_salary,
            "workerCount": self.worker_count,
            "expenses": self.expenses,
            "monthExpenses": self.month_expenses,
            "profit": self.profit,
        }


def daily_summary(
    *,
    day: date,
    works: Sequence[PendingWork],
    attendance: Sequence[AttendanceRecord],
    expenses: Sequence[OtherExpense],
    calculator: SalaryCalculator,
) -> DailySummary:
    day_works = on_date(works, day)
    completed = [w for w in day_works if w.status == WorkStatus.COMPLETED]
    return DailySummary(
        date=to_iso_date(day),
        works_count=len(day_works),
        completed_count=len(completed),
        revenue=completed_revenue(completed),
        worker_salary=worker_salary_for_date(attendance, day, calculator),
        worker_count=worker_count_for_date(attendance, day),
        expenses=expenses_for_date(expenses, day),
        month_expenses=expenses_for_month(expenses, day),
    )
