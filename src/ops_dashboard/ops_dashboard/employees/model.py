from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.docs import iso_or_none, opt_datetime, opt_str


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    address: str
    contact: str
    photo_url: Optional[str] = None
    aadhar_photo_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def image_urls(self) -> list[str]:
        """Image-store URLs owned by this employee (photo, identity document)."""
        return [u for u in (self.photo_url, self.aadhar_photo_url) if u and u.strip()]

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "Employee":
        return cls(
            id=doc["id"],
            name=str(doc.get("name") or ""),
            address=str(doc.get("address") or ""),
            contact=str(doc.get("contact") or ""),
            photo_url=opt_str(doc.get("photoUrl")),
            aadhar_photo_url=opt_str(doc.get("aadharPhotoUrl")),
            created_at=opt_datetime(doc.get("createdAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "contact": self.contact,
            "photoUrl": self.photo_url,
            "aadharPhotoUrl": self.aadhar_photo_url,
            "createdAt": iso_or_none(self.created_at),
        }
