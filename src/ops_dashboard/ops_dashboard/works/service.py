from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote

from ..cascade.service import CascadeDeleteService, WorkDeleteResult
from ..common.datetime_utils import now_local, parse_iso_date, to_iso_date, utc_now
from ..common.docs import as_number, opt_datetime
from ..common.validators import optional_text, parse_amount, require_choice, require_non_empty
from ..core.constants import CURRENCY_SYMBOL
from ..core.enums import WorkStatus, WorkType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..members.repository import MemberRepository
from .model import PendingWork
from .repository import PendingWorkRepository


def _parse_form_date(value: Optional[str], *, today: date) -> str:
    if not value or not value.strip():
        return to_iso_date(today)
    try:
        return to_iso_date(parse_iso_date(value.strip()))
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format")


@dataclass(frozen=True)
class InquiryResult:
    work_id: str
    member_id: Optional[str] = None


class InquiryService:
    """Use case: contact-form intake creating a pending work (and a member for memberships)."""

    def __init__(self, works: PendingWorkRepository, members: MemberRepository):
        self._works = works
        self._members = members

    def submit(
        self,
        *,
        name: str,
        contact: str,
        inquiry_type: str,
        work_type: str,
        address: str = "",
        rate: Any = None,
        work_date: Optional[str] = None,
        worker: Optional[str] = None,
        second_worker: Optional[str] = None,
        membership_duration: Optional[str] = None,
        today: Optional[date] = None,
    ) -> InquiryResult:
        name = require_non_empty(name, "Name")
        contact = require_non_empty(contact, "Contact")
        inquiry_type = require_non_empty(inquiry_type, "Inquiry type")
        kind = WorkType(require_choice(work_type, "Type", WorkType))
        duration = optional_text(membership_duration)
        if kind == WorkType.MEMBERSHIP and not duration:
            raise ValidationError("Please select membership duration")

        cost = as_number(parse_amount(rate, "Rate", default=0))
        raw_rate = str(rate).strip() if rate is not None else ""
        day = _parse_form_date(work_date, today=today or now_local().date())
        label = "Membership" if kind == WorkType.MEMBERSHIP else "Individual Work"

        work_id = self._works.add(
            {
                "customerName": name,
                "contact": contact,
                "address": (address or "").strip(),
                "workType": inquiry_type,
                "description": f"{label} - {inquiry_type}",
                "estimatedCost": cost,
                "status": WorkStatus.PENDING.value,
                "assignedTo": optional_text(worker),
                "secondWorker": optional_text(second_worker),
                "date": day,
                "membershipDuration": duration,
                "type": kind.value,
            }
        )

        if kind != WorkType.MEMBERSHIP:
            return InquiryResult(work_id=work_id)

        member_id = self._members.add(
            {
                "name": name,
                "contact": contact,
                "address": (address or "").strip(),
                "status": "Active",
                "joinDate": day,
                "membershipType": inquiry_type,
                "rate": f"{CURRENCY_SYMBOL}{raw_rate}" if raw_rate else f"{CURRENCY_SYMBOL}0",
                "membershipDuration": duration,
                "pendingWorkId": work_id,
            }
        )
        return InquiryResult(work_id=work_id, member_id=member_id)


# form field -> stored field, for partial edits
_EDITABLE = {
    "customerName": "customerName",
    "contact": "contact",
    "address": "address",
    "workType": "workType",
    "description": "description",
    "estimatedCost": "estimatedCost",
    "status": "status",
    "assignedTo": "assignedTo",
    "secondWorker": "secondWorker",
    "date": "date",
}


class PendingWorkService:
    """Use case: pending/completed work tracking."""

    def __init__(self, works: PendingWorkRepository, cascade: CascadeDeleteService):
        self._works = works
        self._cascade = cascade

    def _require(self, work_id: str) -> PendingWork:
        work = self._works.get(work_id)
        if not work:
            raise NotFoundError(f"pendingWorks/{work_id} does not exist")
        return work

    def list_open(self) -> list[PendingWork]:
        return [w for w in self._works.list_all() if w.status != WorkStatus.COMPLETED]

    def list_completed(self) -> list[PendingWork]:
        return [w for w in self._works.list_all() if w.status == WorkStatus.COMPLETED]

    def edit(self, work_id: str, form: Mapping[str, Any]) -> dict:
        self._require(work_id)
        changes: dict[str, Any] = {}
        for key, field_name in _EDITABLE.items():
            if key not in form:
                continue
            value = form[key]
            if key == "estimatedCost":
                value = as_number(parse_amount(value, "Estimated cost", default=0))
            elif key == "status":
                value = require_choice(value, "Status", WorkStatus)
            elif key == "date":
                value = _parse_form_date(value, today=now_local().date())
            elif key in ("customerName", "contact"):
                value = require_non_empty(value, key)
            elif key in ("assignedTo", "secondWorker"):
                value = optional_text(value)
            else:
                value = (value or "").strip()
            changes[field_name] = value

        if not changes:
            raise ValidationError("Nothing to update")
        self._works.update(work_id, changes)
        return changes

    def change_status(self, work_id: str, new_status: str) -> dict:
        """Transition a work; start/completion times are stamped the first time they apply."""
        work = self._require(work_id)
        status = WorkStatus(require_choice(new_status, "Status", WorkStatus))
        stamp = utc_now().isoformat()

        updates: dict[str, Any] = {"status": status.value}
        if status == WorkStatus.IN_PROGRESS:
            updates["startTime"] = work.start_time or stamp
        elif status == WorkStatus.COMPLETED:
            updates["completedTime"] = stamp
            if not work.start_time:
                updates["startTime"] = stamp

        self._works.update(work_id, updates)
        return updates

    def reopen(self, work_id: str) -> None:
        self._require(work_id)
        self._works.update(work_id, {"status": WorkStatus.PENDING.value})

    def delete(self, work_id: str) -> WorkDeleteResult:
        return self._cascade.delete_pending_work(work_id)

    def delete_completed(self, work_id: str) -> None:
        self._require(work_id)
        self._works.delete(work_id)

    def share_text(self, work_id: str, employees: Sequence[Employee]) -> str:
        work = self._require(work_id)
        names = {e.id: e.name for e in employees}
        workers = [names.get(w, w) for w in (work.assigned_to, work.second_worker) if w]

        try:
            shown_date = parse_iso_date(work.date).strftime("%d/%m/%Y")
        except ValueError:
            shown_date = work.date or "-"

        lines = [
            "Work Details",
            "",
            f"Customer: {work.customer_name}",
            f"Type: {'Membership Work' if work.is_membership else 'Individual Work'}",
            f"Work: {work.work_type}",
            f"Status: {work.status.value.upper()}",
            f"Date: {shown_date}",
            "",
            "Description:",
            work.description,
            "",
            f"Location: {work.address}",
            f"Google Maps: https://www.google.com/maps/search/?api=1&query={quote(work.address, safe='')}",
            f"Contact: {work.contact}",
            f"Estimated Cost: {CURRENCY_SYMBOL}{work.estimated_cost:,}",
        ]
        if workers:
            lines += ["", "Assigned Workers:"] + [f"{i}. {w}" for i, w in enumerate(workers, start=1)]
        started = opt_datetime(work.start_time)
        if started:
            lines += ["", f"Started: {started.astimezone().strftime('%d/%m/%Y %H:%M')}"]
        return "\n".join(lines).strip()
