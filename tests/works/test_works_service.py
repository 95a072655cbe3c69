from __future__ import annotations

from datetime import date

import pytest

from src.ops_dashboard.ops_dashboard.attendance.store_repository import StoreAttendanceRepository
from src.ops_dashboard.ops_dashboard.cascade.service import CascadeDeleteService
from src.ops_dashboard.ops_dashboard.common.notifications import Notifier
from src.ops_dashboard.ops_dashboard.core.constants import ATTENDANCE, EMPLOYEES, MEMBERSHIP_MEMBERS, PENDING_WORKS
from src.ops_dashboard.ops_dashboard.core.enums import WorkStatus, WorkType
from src.ops_dashboard.ops_dashboard.core.exceptions import NotFoundError, ValidationError
from src.ops_dashboard.ops_dashboard.database.accessor import CollectionAccessor
from src.ops_dashboard.ops_dashboard.database.memory_store import InMemoryDocumentStore
from src.ops_dashboard.ops_dashboard.employees.model import Employee
from src.ops_dashboard.ops_dashboard.employees.store_repository import StoreEmployeeRepository
from src.ops_dashboard.ops_dashboard.members.store_repository import StoreMemberRepository
from src.ops_dashboard.ops_dashboard.works.service import InquiryService, PendingWorkService
from src.ops_dashboard.ops_dashboard.works.store_repository import StorePendingWorkRepository


class NoImages:
    def upload(self, data, *, folder, filename):
        raise AssertionError("not used")

    def delete(self, url):
        return True


def _services():
    store = InMemoryDocumentStore()

    def acc(name):
        return CollectionAccessor(store, name, notifier=Notifier)

    works = StorePendingWorkRepository(acc(PENDING_WORKS))
    members = StoreMemberRepository(acc(MEMBERSHIP_MEMBERS))
    cascade = CascadeDeleteService(
        employees=StoreEmployeeRepository(acc(EMPLOYEES)),
        attendance=StoreAttendanceRepository(acc(ATTENDANCE)),
        members=members,
        works=works,
        images=NoImages(),
    )
    return InquiryService(works, members), PendingWorkService(works, cascade), works, members


def _membership(inquiry: InquiryService, **extra):
    data = dict(
        name="John Doe",
        contact="9876543210",
        inquiry_type="Pest Control",
        work_type="membership",
        address="221B Baker Street",
        rate="50000",
        membership_duration="3month",
        today=date(2025, 1, 1),
    )
    data.update(extra)
    return inquiry.submit(**data)


def test_membership_inquiry_creates_work_and_linked_member():
    inquiry, _, works, members = _services()

    result = _membership(inquiry)

    work = works.get(result.work_id)
    assert work.customer_name == "John Doe"
    assert work.estimated_cost == 50000
    assert work.status == WorkStatus.PENDING
    assert work.type == WorkType.MEMBERSHIP
    assert work.description == "Membership - Pest Control"
    assert work.date == "2025-01-01"

    [member] = members.list_all()
    assert member.id == result.member_id
    assert member.rate == "₹50000"
    assert member.status == "Active"
    assert member.join_date == "2025-01-01"
    assert member.membership_type == "Pest Control"
    assert member.pending_work_id == result.work_id


def test_individual_inquiry_creates_only_work():
    inquiry, _, works, members = _services()

    result = inquiry.submit(
        name="Jane",
        contact="1",
        inquiry_type="Repair",
        work_type="individual",
        work_date="2025-03-04",
    )

    assert result.member_id is None
    work = works.get(result.work_id)
    assert work.description == "Individual Work - Repair"
    assert work.estimated_cost == 0
    assert work.date == "2025-03-04"
    assert members.list_all() == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "  "},
        {"contact": ""},
        {"work_type": "weekly"},
        {"membership_duration": ""},
        {"rate": "abc"},
        {"rate": "nan"},
        {"rate": "inf"},
        {"rate": "1e999"},
        {"work_date": "04/03/2025"},
    ],
)
def test_inquiry_validation_blocks_writes(overrides):
    inquiry, _, works, members = _services()

    with pytest.raises(ValidationError):
        _membership(inquiry, **overrides)

    assert works.list_all() == []
    assert members.list_all() == []


def test_missing_rate_gives_zero():
    inquiry, _, works, members = _services()
    result = _membership(inquiry, rate="")

    assert works.get(result.work_id).estimated_cost == 0
    assert members.list_all()[0].rate == "₹0"


def test_status_transitions_stamp_times_once():
    inquiry, svc, works, _ = _services()
    work_id = _membership(inquiry).work_id

    started = svc.change_status(work_id, "in-progress")
    assert started["startTime"]

    svc.change_status(work_id, "in-progress")
    assert works.get(work_id).start_time == started["startTime"]

    done = svc.change_status(work_id, "completed")
    assert "startTime" not in done
    assert done["completedTime"]
    assert [w.id for w in svc.list_completed()] == [work_id]
    assert svc.list_open() == []

    svc.reopen(work_id)
    assert works.get(work_id).status == WorkStatus.PENDING


def test_completing_unstarted_work_sets_both_times():
    inquiry, svc, _, _ = _services()
    work_id = _membership(inquiry).work_id

    updates = svc.change_status(work_id, "completed")
    assert updates["startTime"] == updates["completedTime"]


def test_edit_validates_and_updates_whitelisted_fields():
    inquiry, svc, works, _ = _services()
    work_id = _membership(inquiry).work_id

    changes = svc.edit(work_id, {"estimatedCost": "1200", "address": " New ", "createdAt": "x"})

    assert changes == {"estimatedCost": 1200, "address": "New"}
    assert works.get(work_id).estimated_cost == 1200

    with pytest.raises(ValidationError):
        svc.edit(work_id, {"status": "done"})
    with pytest.raises(ValidationError):
        svc.edit(work_id, {})
    with pytest.raises(NotFoundError):
        svc.edit("missing", {"address": "x"})


@pytest.mark.parametrize("cost", ["nan", "inf", "-1e999"])
def test_edit_rejects_non_finite_cost(cost):
    inquiry, svc, works, _ = _services()
    work_id = _membership(inquiry, rate="500").work_id

    with pytest.raises(ValidationError):
        svc.edit(work_id, {"estimatedCost": cost, "address": "Changed"})

    work = works.get(work_id)
    assert work.estimated_cost == 500
    assert work.address != "Changed"


def test_delete_membership_work_cascades_but_completed_delete_does_not():
    inquiry, svc, works, members = _services()
    first = _membership(inquiry)
    second = _membership(inquiry, name="Other", contact="2")

    assert svc.delete(first.work_id).members_deleted == 1
    assert [m.id for m in members.list_all()] == [second.member_id]

    svc.change_status(second.work_id, "completed")
    svc.delete_completed(second.work_id)
    assert works.list_all() == []
    assert [m.id for m in members.list_all()] == [second.member_id]


def test_share_text_includes_map_link_and_worker_names():
    inquiry, svc, _, _ = _services()
    work_id = _membership(inquiry, worker="e1", second_worker="e2").work_id
    employees = [Employee(id="e1", name="Ravi", address="", contact=""), Employee(id="e2", name="Amit", address="", contact="")]

    text = svc.share_text(work_id, employees)

    assert "Customer: John Doe" in text
    assert "Date: 01/01/2025" in text
    assert "https://www.google.com/maps/search/?api=1&query=221B%20Baker%20Street" in text
    assert "Estimated Cost: ₹50,000" in text
    assert "1. Ravi" in text
    assert "2. Amit" in text
    assert "Started:" not in text
