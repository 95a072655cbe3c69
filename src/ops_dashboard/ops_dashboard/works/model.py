from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.docs import as_number, iso_or_none, opt_datetime, opt_str
from ..core.enums import WorkStatus, WorkType


@dataclass(frozen=True)
class PendingWork:
    """A customer work request; completed works live in the same collection."""

    id: str
    customer_name: str
    contact: str
    address: str
    work_type: str
    description: str
    estimated_cost: float
    status: WorkStatus
    date: str
    type: Optional[WorkType] = None
    assigned_to: Optional[str] = None
    second_worker: Optional[str] = None
    start_time: Optional[str] = None
    completed_time: Optional[str] = None
    membership_duration: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_membership(self) -> bool:
        return self.type == WorkType.MEMBERSHIP

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "PendingWork":
        raw_type = doc.get("type")
        return cls(
            id=doc["id"],
            customer_name=str(doc.get("customerName") or ""),
            contact=str(doc.get("contact") or ""),
            address=str(doc.get("address") or ""),
            work_type=str(doc.get("workType") or ""),
            description=str(doc.get("description") or ""),
            estimated_cost=as_number(doc.get("estimatedCost")),
            status=WorkStatus(doc.get("status") or WorkStatus.PENDING.value),
            date=str(doc.get("date") or ""),
            type=WorkType(raw_type) if raw_type in {t.value for t in WorkType} else None,
            assigned_to=opt_str(doc.get("assignedTo")),
            second_worker=opt_str(doc.get("secondWorker")),
            start_time=opt_str(doc.get("startTime")),
            completed_time=opt_str(doc.get("completedTime")),
            membership_duration=opt_str(doc.get("membershipDuration")),
            created_at=opt_datetime(doc.get("createdAt")),
            updated_at=opt_datetime(doc.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "contact": self.contact,
            "address": self.address,
            "workType": self.work_type,
            "description": self.description,
            "estimatedCost": self.estimated_cost,
            "status": self.status.value,
            "date": self.date,
            "type": self.type.value if self.type else None,
            "assignedTo": self.assigned_to,
            "secondWorker": self.second_worker,
            "startTime": self.start_time,
            "completedTime": self.completed_time,
            "membershipDuration": self.membership_duration,
            "createdAt": iso_or_none(self.created_at),
            "updatedAt": iso_or_none(self.updated_at),
        }
