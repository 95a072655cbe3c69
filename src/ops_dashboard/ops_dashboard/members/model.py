from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.docs import iso_or_none, opt_datetime, opt_str


@dataclass(frozen=True)
class MembershipMember:
    id: str
    name: str
    contact: str
    address: str
    status: str
    join_date: str
    membership_type: str
    rate: str
    membership_duration: Optional[str] = None
    pending_work_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "MembershipMember":
        return cls(
            id=doc["id"],
            name=str(doc.get("name") or ""),
            contact=str(doc.get("contact") or ""),
            address=str(doc.get("address") or ""),
            status=str(doc.get("status") or ""),
            join_date=str(doc.get("joinDate") or ""),
            membership_type=str(doc.get("membershipType") or ""),
            rate=str(doc.get("rate") or ""),
            membership_duration=opt_str(doc.get("membershipDuration")),
            pending_work_id=opt_str(doc.get("pendingWorkId")),
            created_at=opt_datetime(doc.get("createdAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "contact": self.contact,
            "address": self.address,
            "status": self.status,
            "joinDate": self.join_date,
            "membershipType": self.membership_type,
            "rate": self.rate,
            "membershipDuration": self.membership_duration,
            "pendingWorkId": self.pending_work_id,
            "createdAt": iso_or_none(self.created_at),
        }
