from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import MembershipMember


class MemberRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, member_id: str) -> Optional[MembershipMember]:
        raise NotImplementedError

    def list_all(self) -> Sequence[MembershipMember]:
        raise NotImplementedError

    def find_by_name_and_contact(self, *, name: str, contact: str) -> Sequence[MembershipMember]:
        raise NotImplementedError

    def find_by_pending_work(self, work_id: str) -> Sequence[MembershipMember]:
        raise NotImplementedError

    def delete(self, member_id: str) -> None:
        raise NotImplementedError
