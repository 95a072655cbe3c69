from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import WorkStatus
from ..employees.repository import EmployeeRepository
from ..expenses.repository import ExpenseRepository
from ..payroll.calculator.base import SalaryCalculator
from ..reports.aggregates import daily_summary, on_date
from ..works.repository import PendingWorkRepository


class DashboardService:
    """Headline numbers for the landing page."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        works: PendingWorkRepository,
        attendance: AttendanceRepository,
        expenses: ExpenseRepository,
        calculator: SalaryCalculator,
    ):
        self._employees = employees
        self._works = works
        self._attendance = attendance
        self._expenses = expenses
        self._calculator = calculator

    def stats(self, *, today: Optional[date] = None) -> dict:
        today = today or now_local().date()
        works = self._works.list_all()
        summary = daily_summary(
            day=today,
            works=works,
            attendance=self._attendance.list_all(),
            expenses=self._expenses.list_all(),
            calculator=self._calculator,
        )
        return {
            "totalEmployees": len(self._employees.list_all()),
            "pendingWorks": sum(1 for w in works if w.status != WorkStatus.COMPLETED),
            "todayInquiries": len(on_date(works, today)),
            "todayCompleted": summary.completed_count,
            "todayRevenue": summary.revenue,
            "todayWorkerSalary": summary.worker_salary,
            "todayWorkerCount": summary.worker_count,
            "todayProfit": summary.profit,
        }
