"""Cross-collection deletes.

Both cascades are best-effort: a failing sub-deletion is logged and recorded in
the result but never aborts the remaining steps, and nothing is rolled back.
Sibling deletions run concurrently and are awaited together.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Sequence, TypeVar

from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_CASCADE_WORKERS
from ..core.exceptions import ImageDeleteUnavailable, NotFoundError, StoreError
from ..employees.repository import EmployeeRepository
from ..images.store import ImageStore
from ..members.model import MembershipMember
from ..members.repository import MemberRepository
from ..works.model import PendingWork
from ..works.repository import PendingWorkRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RelatedCounts:
    attendance: int
    images: int

    def to_dict(self) -> dict:
        return {"attendance": self.attendance, "images": self.images}


@dataclass
class CascadeResult:
    attendance: int = 0
    images: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict:
        return {"attendance": self.attendance, "images": self.images, "failures": list(self.failures)}


@dataclass
class WorkDeleteResult:
    members_deleted: int = 0
    failures: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"membersDeleted": self.members_deleted, "failures": list(self.failures)}


class CascadeDeleteService:
    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        members: MemberRepository,
        works: PendingWorkRepository,
        images: ImageStore,
        max_workers: int = DEFAULT_CASCADE_WORKERS,
    ):
        self._employees = employees
        self._attendance = attendance
        self._members = members
        self._works = works
        self._images = images
        self._max_workers = max(1, int(max_workers))

    def _fan_out(self, fn: Callable[[T], bool], items: Sequence[T], describe: Callable[[T], str]) -> tuple[int, list[str]]:
        """Run ``fn`` over all items concurrently; return (successes, failure descriptions)."""
        if not items:
            return 0, []

        def guarded(item: T) -> tuple[bool, str | None]:
            try:
                return bool(fn(item)), None
            except ImageDeleteUnavailable as exc:
                logger.warning("Image delete unavailable for %s: %s", describe(item), exc)
                return False, f"{describe(item)}: image deletion unavailable"
            except (StoreError, OSError) as exc:
                logger.error("Cascade step failed for %s: %s", describe(item), exc)
                return False, f"{describe(item)}: {exc}"

        workers = min(len(items), self._max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="cascade") as pool:
            outcomes = list(pool.map(guarded, items))

        ok = sum(1 for success, _ in outcomes if success)
        failures = [msg for success, msg in outcomes if msg]
        return ok, failures

    # ---- employee -------------------------------------------------------

    def get_related_data_counts(self, employee_id: str) -> RelatedCounts:
        """Preview of what ``cascade_delete_employee`` would remove (no locking)."""
        attendance = len(self._attendance.list_for_employee(employee_id))
        employee = self._employees.get(employee_id)
        images = len(employee.image_urls) if employee else 0
        return RelatedCounts(attendance=attendance, images=images)

    def cascade_delete_employee(self, employee_id: str) -> CascadeResult:
        """Delete an employee's images and attendance; the employee document itself is left to the caller."""
        result = CascadeResult()

        try:
            employee = self._employees.get(employee_id)
        except StoreError as exc:
            logger.error("Could not read employee %s: %s", employee_id, exc)
            result.failures.append(f"employee {employee_id}: {exc}")
            employee = None

        if employee and employee.image_urls:
            logger.info("Deleting %d images for employee %s", len(employee.image_urls), employee_id)
            result.images, failures = self._fan_out(self._images.delete, employee.image_urls, lambda u: f"image {u}")
            result.failures.extend(failures)

        try:
            records = self._attendance.list_for_employee(employee_id)
        except StoreError as exc:
            logger.error("Could not query attendance for %s: %s", employee_id, exc)
            result.failures.append(f"attendance query: {exc}")
            records = []

        def _delete_record(rec) -> bool:
            self._attendance.delete(rec.id)
            return True

        result.attendance, failures = self._fan_out(_delete_record, records, lambda r: f"attendance {r.id}")
        result.failures.extend(failures)

        logger.info(
            "Cascade for employee %s: attendance=%d images=%d failures=%d",
            employee_id, result.attendance, result.images, len(result.failures),
        )
        return result

    def delete_employee(self, employee_id: str) -> CascadeResult:
        """Dependents first, then the employee document (not atomic)."""
        if not self._employees.get(employee_id):
            raise NotFoundError(f"employees/{employee_id} does not exist")
        result = self.cascade_delete_employee(employee_id)
        self._employees.delete(employee_id)
        return result

    # ---- pending work -> membership member -----------------------------

    def _members_for(self, work: PendingWork) -> list[MembershipMember]:
        linked = list(self._members.find_by_pending_work(work.id))
        if linked:
            return linked
        # records created before the explicit link existed: match on name + contact
        return [
            m
            for m in self._members.find_by_name_and_contact(name=work.customer_name, contact=work.contact)
            if not m.pending_work_id
        ]

    def delete_membership_members_for(self, work: PendingWork) -> WorkDeleteResult:
        result = WorkDeleteResult()
        if not work.is_membership:
            return result

        try:
            targets = self._members_for(work)
        except StoreError as exc:
            logger.error("Could not query members for work %s: %s", work.id, exc)
            result.failures.append(f"member query: {exc}")
            return result

        def _delete_member(m: MembershipMember) -> bool:
            self._members.delete(m.id)
            return True

        result.members_deleted, result.failures = self._fan_out(_delete_member, targets, lambda m: f"member {m.id}")
        return result

    def delete_pending_work(self, work_id: str) -> WorkDeleteResult:
        """Delete a work and, for membership works, its member. Zero matching members is not an error."""
        work = self._works.get(work_id)
        if work is None:
            raise NotFoundError(f"pendingWorks/{work_id} does not exist")
        result = self.delete_membership_members_for(work)
        self._works.delete(work.id)
        return result
