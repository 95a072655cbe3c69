from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.docs import as_number, iso_or_none, opt_datetime, opt_str


@dataclass(frozen=True)
class UpadRecord:
    """An advance (upad) paid to an employee; deducted from that month's salary."""

    id: str
    employee_id: str
    amount: float
    date: str
    note: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "UpadRecord":
        return cls(
            id=doc["id"],
            employee_id=str(doc.get("employeeId") or ""),
            amount=as_number(doc.get("amount")),
            date=str(doc.get("date") or ""),
            note=opt_str(doc.get("note")),
            created_at=opt_datetime(doc.get("createdAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "amount": self.amount,
            "date": self.date,
            "note": self.note,
            "createdAt": iso_or_none(self.created_at),
        }


@dataclass(frozen=True)
class SalarySummary:
    employee_id: str
    month: str
    gross: float
    advances: float

    @property
    def net(self) -> float:
        return self.gross - self.advances


@dataclass(frozen=True)
class SalaryDay:
    date: str
    status: Optional[str]
    amount: float
