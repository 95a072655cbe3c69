from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import month_key, parse_iso_date, to_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.constants import (
    DEFAULT_CHECK_IN,
    DEFAULT_CHECK_OUT,
    FULL_DAY_HOURS,
    HALF_DAY_CHECK_OUT,
    HALF_DAY_HOURS,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceSummaryRow
from .repository import AttendanceRepository

CSV_FIELDS = ["date", "employeeName", "status", "checkIn", "checkOut", "workHours", "notes"]


def derived_fields(status: AttendanceStatus) -> dict:
    """Check-in/out and hours implied by a status."""
    if status == AttendanceStatus.PRESENT:
        return {"checkIn": DEFAULT_CHECK_IN, "checkOut": DEFAULT_CHECK_OUT, "workHours": FULL_DAY_HOURS}
    if status == AttendanceStatus.HALF_DAY:
        return {"checkIn": DEFAULT_CHECK_IN, "checkOut": HALF_DAY_CHECK_OUT, "workHours": HALF_DAY_HOURS}
    return {"checkIn": "", "checkOut": "", "workHours": 0}


def _parse_day(value: str) -> str:
    value = require_non_empty(value, "Date")
    try:
        return to_iso_date(parse_iso_date(value))
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format")


def count_by_status(records: Sequence[AttendanceRecord]) -> dict[str, int]:
    counts = {s.value: 0 for s in AttendanceStatus}
    for r in records:
        if r.status:
            counts[r.status.value] += 1
    return counts


@dataclass(frozen=True)
class BulkMarkResult:
    created: int
    skipped: int

    def to_dict(self) -> dict:
        return {"created": self.created, "skipped": self.skipped}


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def bulk_mark(self, work_date: str, statuses: Optional[Mapping[str, str]] = None) -> BulkMarkResult:
        """Create one record per employee without one on ``work_date``; existing records are left alone."""
        day = _parse_day(work_date)
        chosen = {
            employee_id: AttendanceStatus(require_choice(value, "Status", AttendanceStatus))
            for employee_id, value in (statuses or {}).items()
            if value
        }

        employees = self._employees.list_all()
        if not employees:
            raise ValidationError("No employees to mark")

        already = {r.employee_id for r in self._attendance.list_for_date(day)}
        created = skipped = 0
        for emp in employees:
            if emp.id in already:
                skipped += 1
                continue
            status = chosen.get(emp.id, AttendanceStatus.PRESENT)
            self._attendance.add(
                {
                    "employeeId": emp.id,
                    "employeeName": emp.name,
                    "date": day,
                    "status": status.value,
                    "notes": "",
                    **derived_fields(status),
                }
            )
            created += 1
        return BulkMarkResult(created=created, skipped=skipped)

    def update_status(self, record_id: str, status: str) -> None:
        if not self._attendance.get(record_id):
            raise NotFoundError(f"attendance/{record_id} does not exist")
        new_status = AttendanceStatus(require_choice(status, "Status", AttendanceStatus))
        self._attendance.update(record_id, {"status": new_status.value, **derived_fields(new_status)})

    def delete(self, record_id: str) -> None:
        if not self._attendance.get(record_id):
            raise NotFoundError(f"attendance/{record_id} does not exist")
        self._attendance.delete(record_id)

    def filter(self, *, work_date: Optional[str] = None, employee_id: Optional[str] = None) -> list[AttendanceRecord]:
        if employee_id:
            records = list(self._attendance.list_for_employee(employee_id))
            if work_date:
                records = [r for r in records if r.date == work_date]
        elif work_date:
            records = list(self._attendance.list_for_date(work_date))
        else:
            records = list(self._attendance.list_all())
        return sorted(records, key=lambda r: (r.date, r.employee_name), reverse=True)

    def today_counts(self, *, today: date) -> dict[str, int]:
        return count_by_status(self._attendance.list_for_date(to_iso_date(today)))

    def monthly_summary(self, *, month: date) -> dict:
        prefix = month_key(month)
        records = [r for r in self._attendance.list_all() if r.date.startswith(prefix)]
        working_days = len({r.date for r in records})

        rows = []
        for emp in self._employees.list_all():
            counts = count_by_status([r for r in records if r.employee_id == emp.id])
            total = sum(counts.values())
            rows.append(
                AttendanceSummaryRow(
                    employee_id=emp.id,
                    employee_name=emp.name,
                    present=counts[AttendanceStatus.PRESENT.value],
                    absent=counts[AttendanceStatus.ABSENT.value],
                    half_day=counts[AttendanceStatus.HALF_DAY.value],
                    leave=counts[AttendanceStatus.LEAVE.value],
                    percentage=round(counts[AttendanceStatus.PRESENT.value] / total * 100) if total else 0,
                )
            )
        return {"month": prefix, "workingDays": working_days, "rows": rows}

    def export_csv(self, records: Sequence[AttendanceRecord]) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for r in records:
            writer.writerow(r.to_dict())
        return out.getvalue().encode("utf-8-sig")
