from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from .repository import MemberRepository
from .schedule import member_schedule


class MemberService:
    """Use case: membership members list and removal.

    Removing a member never touches the pending work it came from.
    """

    def __init__(self, members: MemberRepository):
        self._members = members

    def list_with_schedule(self, *, today: Optional[date] = None) -> list[dict]:
        today = today or now_local().date()
        rows = []
        for m in self._members.list_all():
            schedule = member_schedule(m.join_date, m.membership_duration, today=today)
            rows.append({**m.to_dict(), **schedule.to_dict()})
        return rows

    def due_today(self, *, today: Optional[date] = None) -> list[dict]:
        return [row for row in self.list_with_schedule(today=today) if row["isWorkDay"]]

    def delete(self, member_id: str) -> None:
        if not self._members.get(member_id):
            raise NotFoundError(f"membershipMembers/{member_id} does not exist")
        self._members.delete(member_id)
