from __future__ import annotations

import io
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month, month_key, now_local, to_iso_date
from ..common.validators import optional_text, require_non_empty, require_positive_amount
from ..core.constants import DEFAULT_UPAD_HISTORY
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import DayRateSalaryCalculator
from .model import SalaryDay, SalarySummary, UpadRecord
from .repository import UpadRepository


def monthly_salary(
    records: Sequence[AttendanceRecord],
    *,
    employee_id: str,
    day: date,
    calculator: SalaryCalculator,
) -> float:
    prefix = month_key(day)
    return sum(
        calculator.amount_for(r.status)
        for r in records
        if r.employee_id == employee_id and r.date.startswith(prefix)
    )


def monthly_advances(upads: Sequence[UpadRecord], *, employee_id: str, day: date) -> float:
    prefix = month_key(day)
    return sum(u.amount for u in upads if u.employee_id == employee_id and u.date.startswith(prefix))


def salary_summary(
    records: Sequence[AttendanceRecord],
    upads: Sequence[UpadRecord],
    *,
    employee_id: str,
    day: date,
    calculator: SalaryCalculator,
) -> SalarySummary:
    return SalarySummary(
        employee_id=employee_id,
        month=month_key(day),
        gross=monthly_salary(records, employee_id=employee_id, day=day, calculator=calculator),
        advances=monthly_advances(upads, employee_id=employee_id, day=day),
    )


def daily_breakdown(
    records: Sequence[AttendanceRecord],
    *,
    employee_id: str,
    month: date,
    calculator: SalaryCalculator,
) -> list[SalaryDay]:
    by_date = {r.date: r for r in records if r.employee_id == employee_id}
    out = []
    for d in days_in_month(month.year, month.month):
        rec = by_date.get(to_iso_date(d))
        out.append(
            SalaryDay(
                date=to_iso_date(d),
                status=rec.status.value if rec and rec.status else None,
                amount=calculator.amount_for(rec.status) if rec else 0,
            )
        )
    return out


class PayrollService:
    """Use case: salaries and advances (upad) for employees."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        upads: UpadRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._attendance = attendance
        self._upads = upads
        self._employees = employees
        self.calculator = calculator or DayRateSalaryCalculator()

    def add_upad(self, *, employee_id: str, amount, note: Optional[str] = None, today: Optional[date] = None) -> str:
        employee_id = require_non_empty(employee_id, "Employee")
        amt = require_positive_amount(amount, "Amount")
        if not self._employees.get(employee_id):
            raise ValidationError("Employee does not exist")

        data = {
            "employeeId": employee_id,
            "amount": amt,
            "date": to_iso_date(today or now_local().date()),
        }
        note = optional_text(note)
        if note:
            data["note"] = note
        return self._upads.add(data)

    def recent_upads(self, employee_id: str, *, limit: int = DEFAULT_UPAD_HISTORY) -> list[UpadRecord]:
        return list(self._upads.list_for_employee(employee_id))[:limit]

    def summary_for(self, employee_id: str, *, day: date) -> SalarySummary:
        return salary_summary(
            self._attendance.list_for_employee(employee_id),
            self._upads.list_for_employee(employee_id),
            employee_id=employee_id,
            day=day,
            calculator=self.calculator,
        )

    def monthly_breakdown(self, employee_id: str, *, month: date) -> dict:
        records = self._attendance.list_for_employee(employee_id)
        days = daily_breakdown(records, employee_id=employee_id, month=month, calculator=self.calculator)
        summary = self.summary_for(employee_id, day=month)
        return {
            "month": summary.month,
            "days": [{"date": d.date, "status": d.status, "amount": d.amount} for d in days],
            "totalSalary": summary.gross,
            "totalAdvances": summary.advances,
            "netSalary": summary.net,
        }

    def roster(self, *, today: date) -> list[dict]:
        """Per-employee today's pay and month-to-date net, for the workers list."""
        employees = self._employees.list_all()
        records = self._attendance.list_all()
        upads = self._upads.list_all()
        today_iso = to_iso_date(today)

        rows = []
        for emp in employees:
            today_rec = next((r for r in records if r.employee_id == emp.id and r.date == today_iso), None)
            summary = salary_summary(records, upads, employee_id=emp.id, day=today, calculator=self.calculator)
            rows.append(
                {
                    **emp.to_dict(),
                    "todayStatus": today_rec.status.value if today_rec and today_rec.status else None,
                    "todaySalary": self.calculator.amount_for(today_rec.status) if today_rec else 0,
                    "monthSalary": summary.gross,
                    "monthAdvances": summary.advances,
                    "netMonthSalary": summary.net,
                }
            )
        return rows

    def export_month_excel(self, *, month: date) -> bytes:
        employees = self._employees.list_all()
        records = self._attendance.list_all()
        upads = self._upads.list_all()

        data = []
        for emp in employees:
            summary = salary_summary(records, upads, employee_id=emp.id, day=month, calculator=self.calculator)
            data.append(
                {
                    "Employee": emp.name,
                    "Contact": emp.contact,
                    "Month": summary.month,
                    "Salary": summary.gross,
                    "Advances": summary.advances,
                    "Net": summary.net,
                }
            )

        df = pd.DataFrame(data, columns=["Employee", "Contact", "Month", "Salary", "Advances", "Net"])
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Salary")
        return output.getvalue()
