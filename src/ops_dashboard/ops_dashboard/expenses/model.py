from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.docs import as_number, iso_or_none, opt_datetime


@dataclass(frozen=True)
class OtherExpense:
    id: str
    amount: float
    description: str
    date: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "OtherExpense":
        return cls(
            id=doc["id"],
            amount=as_number(doc.get("amount")),
            description=str(doc.get("description") or ""),
            date=str(doc.get("date") or ""),
            created_at=opt_datetime(doc.get("createdAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "description": self.description,
            "date": self.date,
            "createdAt": iso_or_none(self.created_at),
        }
