from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import CREATED_AT
from ..database.accessor import CollectionAccessor
from ..database.store import desc
from .model import MembershipMember
from .repository import MemberRepository


class StoreMemberRepository(MemberRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def get(self, member_id: str) -> Optional[MembershipMember]:
        doc = self.accessor.get(member_id)
        return MembershipMember.from_doc(doc) if doc else None

    def list_all(self) -> Sequence[MembershipMember]:
        return [MembershipMember.from_doc(d) for d in self.accessor.list(order_by=[desc(CREATED_AT)])]

    def find_by_name_and_contact(self, *, name: str, contact: str) -> Sequence[MembershipMember]:
        docs = self.accessor.list(where={"name": name, "contact": contact})
        return [MembershipMember.from_doc(d) for d in docs]

    def find_by_pending_work(self, work_id: str) -> Sequence[MembershipMember]:
        return [MembershipMember.from_doc(d) for d in self.accessor.find_by("pendingWorkId", work_id)]

    def delete(self, member_id: str) -> None:
        self.accessor.remove(member_id)
