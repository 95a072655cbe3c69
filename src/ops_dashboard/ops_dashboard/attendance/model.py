from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.docs import as_number
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance for one calendar date (yyyy-MM-dd)."""

    id: str
    employee_id: str
    employee_name: str
    date: str
    status: Optional[AttendanceStatus]
    check_in: str = ""
    check_out: str = ""
    work_hours: float = 0
    notes: str = ""

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "AttendanceRecord":
        raw = doc.get("status")
        return cls(
            id=doc["id"],
            employee_id=str(doc.get("employeeId") or ""),
            employee_name=str(doc.get("employeeName") or ""),
            date=str(doc.get("date") or ""),
            status=AttendanceStatus(raw) if raw in {s.value for s in AttendanceStatus} else None,
            check_in=str(doc.get("checkIn") or ""),
            check_out=str(doc.get("checkOut") or ""),
            work_hours=as_number(doc.get("workHours")),
            notes=str(doc.get("notes") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "date": self.date,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "status": self.status.value if self.status else None,
            "workHours": self.work_hours,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceSummaryRow:
    """Read-model for the monthly per-employee summary table."""

    employee_id: str
    employee_name: str
    present: int
    absent: int
    half_day: int
    leave: int
    percentage: int
