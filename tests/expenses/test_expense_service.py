from __future__ import annotations

from datetime import date

import pytest

from src.ops_dashboard.ops_dashboard.attendance.store_repository import StoreAttendanceRepository
from src.ops_dashboard.ops_dashboard.common.notifications import Notifier
from src.ops_dashboard.ops_dashboard.core.constants import ATTENDANCE, OTHER_EXPENSES, PENDING_WORKS
from src.ops_dashboard.ops_dashboard.core.exceptions import ValidationError
from src.ops_dashboard.ops_dashboard.database.accessor import CollectionAccessor
from src.ops_dashboard.ops_dashboard.database.memory_store import InMemoryDocumentStore
from src.ops_dashboard.ops_dashboard.expenses.repository import StoreExpenseRepository
from src.ops_dashboard.ops_dashboard.expenses.service import ExpenseService, complete_entries
from src.ops_dashboard.ops_dashboard.payroll.calculator.standard_calculator import DayRateSalaryCalculator
from src.ops_dashboard.ops_dashboard.works.store_repository import StorePendingWorkRepository

DAY = date(2025, 1, 10)


def _setup():
    store = InMemoryDocumentStore()

    def acc(name):
        return CollectionAccessor(store, name, notifier=Notifier)

    expenses = StoreExpenseRepository(acc(OTHER_EXPENSES))
    works = StorePendingWorkRepository(acc(PENDING_WORKS))
    attendance = StoreAttendanceRepository(acc(ATTENDANCE))
    svc = ExpenseService(expenses, works, attendance, calculator=DayRateSalaryCalculator(400))
    return svc, expenses, works, attendance


def test_incomplete_entries_are_dropped():
    entries = [
        {"amount": "100", "description": "Fuel"},
        {"amount": "", "description": "Tea"},
        {"amount": "50", "description": "  "},
        {"amount": "abc", "description": "x"},
        {"amount": "12.5", "description": " Snacks "},
    ]
    assert complete_entries(entries) == [
        {"amount": 100, "description": "Fuel"},
        {"amount": 12.5, "description": "Snacks"},
    ]


def test_non_finite_amounts_are_dropped():
    entries = [
        {"amount": "nan", "description": "Bad"},
        {"amount": "inf", "description": "Worse"},
        {"amount": "1e999", "description": "Overflow"},
        {"amount": "40", "description": "Tea"},
    ]
    assert complete_entries(entries) == [{"amount": 40, "description": "Tea"}]


def test_save_requires_at_least_one_complete_entry():
    svc, expenses, _, _ = _setup()
    with pytest.raises(ValidationError):
        svc.save(day=DAY, entries=[{"amount": "", "description": ""}])
    assert expenses.list_all() == []


def test_save_and_daily_profit():
    svc, expenses, works, attendance = _setup()
    works.add({"customerName": "C", "estimatedCost": 2000, "status": "completed", "date": "2025-01-10"})
    works.add({"customerName": "D", "estimatedCost": 900, "status": "pending", "date": "2025-01-10"})
    attendance.add({"employeeId": "e1", "date": "2025-01-10", "status": "present"})
    attendance.add({"employeeId": "e2", "date": "2025-01-10", "status": "half-day"})

    ids = svc.save(day=DAY, entries=[{"amount": "150", "description": "Fuel"}, {"amount": "50", "description": "Tea"}])
    svc.save(day=date(2025, 1, 2), entries=[{"amount": 30, "description": "Old"}])

    assert len(ids) == 2
    assert {e.date for e in expenses.list_all()} == {"2025-01-10", "2025-01-02"}

    summary = svc.daily_summary(day=DAY)
    assert summary.revenue == 2000
    assert summary.worker_salary == 600
    assert summary.worker_count == 2
    assert summary.expenses == 200
    assert summary.month_expenses == 230
    assert summary.profit == 1200
