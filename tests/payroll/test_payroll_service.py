from __future__ import annotations

import io
from datetime import date

import pandas as pd
import pytest

from src.ops_dashboard.ops_dashboard.attendance.model import AttendanceRecord
from src.ops_dashboard.ops_dashboard.attendance.store_repository import StoreAttendanceRepository
from src.ops_dashboard.ops_dashboard.common.notifications import Notifier
from src.ops_dashboard.ops_dashboard.core.constants import ATTENDANCE, EMPLOYEES, UPADS
from src.ops_dashboard.ops_dashboard.core.enums import AttendanceStatus
from src.ops_dashboard.ops_dashboard.core.exceptions import ValidationError
from src.ops_dashboard.ops_dashboard.database.accessor import CollectionAccessor
from src.ops_dashboard.ops_dashboard.database.memory_store import InMemoryDocumentStore
from src.ops_dashboard.ops_dashboard.employees.store_repository import StoreEmployeeRepository
from src.ops_dashboard.ops_dashboard.payroll.calculator.standard_calculator import DayRateSalaryCalculator
from src.ops_dashboard.ops_dashboard.payroll.model import UpadRecord
from src.ops_dashboard.ops_dashboard.payroll.repository import StoreUpadRepository
from src.ops_dashboard.ops_dashboard.payroll.service import PayrollService, monthly_salary, salary_summary

JAN = date(2025, 1, 15)


def _rec(employee_id: str, day: str, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(id=f"{employee_id}-{day}", employee_id=employee_id, employee_name="E", date=day, status=status)


def _service():
    store = InMemoryDocumentStore()
    attendance = StoreAttendanceRepository(CollectionAccessor(store, ATTENDANCE, notifier=Notifier))
    upads = StoreUpadRepository(CollectionAccessor(store, UPADS, notifier=Notifier))
    employees = StoreEmployeeRepository(CollectionAccessor(store, EMPLOYEES, notifier=Notifier))
    svc = PayrollService(attendance, upads, employees, calculator=DayRateSalaryCalculator(400))
    return svc, attendance, employees


def test_monthly_salary_sums_present_half_and_absent():
    records = [
        _rec("e1", "2025-01-01", AttendanceStatus.PRESENT),
        _rec("e1", "2025-01-02", AttendanceStatus.HALF_DAY),
        _rec("e1", "2025-01-03", AttendanceStatus.ABSENT),
        _rec("e1", "2025-02-01", AttendanceStatus.PRESENT),
        _rec("e2", "2025-01-01", AttendanceStatus.PRESENT),
    ]

    total = monthly_salary(records, employee_id="e1", day=JAN, calculator=DayRateSalaryCalculator(400))
    assert total == 400 + 200 + 0


def test_net_salary_subtracts_advances_of_the_month():
    records = [
        _rec("e1", "2025-01-01", AttendanceStatus.PRESENT),
        _rec("e1", "2025-01-02", AttendanceStatus.HALF_DAY),
    ]
    upads = [
        UpadRecord(id="u1", employee_id="e1", amount=100, date="2025-01-05"),
        UpadRecord(id="u2", employee_id="e1", amount=999, date="2024-12-31"),
    ]

    summary = salary_summary(records, upads, employee_id="e1", day=JAN, calculator=DayRateSalaryCalculator(400))

    assert summary.gross == 600
    assert summary.advances == 100
    assert summary.net == 500


def test_add_upad_validates_amount_and_employee():
    svc, _, employees = _service()
    emp = employees.add({"name": "Ravi", "contact": "1", "address": "a"})

    with pytest.raises(ValidationError):
        svc.add_upad(employee_id=emp, amount="0")
    with pytest.raises(ValidationError):
        svc.add_upad(employee_id="missing", amount="10")

    svc.add_upad(employee_id=emp, amount="150", note="  fuel  ", today=JAN)
    [upad] = svc.recent_upads(emp)
    assert upad.amount == 150
    assert upad.note == "fuel"
    assert upad.date == "2025-01-15"


@pytest.mark.parametrize("amount", ["nan", "inf", "-inf", "1e999"])
def test_add_upad_rejects_non_finite_amounts(amount):
    svc, _, employees = _service()
    emp = employees.add({"name": "Ravi", "contact": "1", "address": "a"})

    with pytest.raises(ValidationError):
        svc.add_upad(employee_id=emp, amount=amount, today=JAN)

    assert svc.recent_upads(emp) == []


def test_monthly_breakdown_lists_every_day():
    svc, attendance, employees = _service()
    emp = employees.add({"name": "Ravi", "contact": "1", "address": "a"})
    attendance.add({"employeeId": emp, "employeeName": "Ravi", "date": "2025-01-02", "status": "present"})
    attendance.add({"employeeId": emp, "employeeName": "Ravi", "date": "2025-01-03", "status": "half-day"})

    out = svc.monthly_breakdown(emp, month=JAN)

    assert out["month"] == "2025-01"
    assert len(out["days"]) == 31
    assert out["days"][1] == {"date": "2025-01-02", "status": "present", "amount": 400}
    assert out["days"][0]["status"] is None
    assert out["totalSalary"] == 600
    assert out["netSalary"] == 600


def test_export_month_excel():
    svc, attendance, employees = _service()
    emp = employees.add({"name": "Ravi", "contact": "1", "address": "a"})
    attendance.add({"employeeId": emp, "employeeName": "Ravi", "date": "2025-01-02", "status": "present"})

    data = svc.export_month_excel(month=JAN)

    df = pd.read_excel(io.BytesIO(data), sheet_name="Salary")
    assert list(df.columns) == ["Employee", "Contact", "Month", "Salary", "Advances", "Net"]
    assert df.iloc[0]["Employee"] == "Ravi"
    assert df.iloc[0]["Net"] == 400
