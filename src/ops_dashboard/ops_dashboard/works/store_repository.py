from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import CREATED_AT
from ..database.accessor import CollectionAccessor
from ..database.store import desc
from .model import PendingWork
from .repository import PendingWorkRepository


class StorePendingWorkRepository(PendingWorkRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def get(self, work_id: str) -> Optional[PendingWork]:
        doc = self.accessor.get(work_id)
        return PendingWork.from_doc(doc) if doc else None

    def list_all(self) -> Sequence[PendingWork]:
        return [PendingWork.from_doc(d) for d in self.accessor.list(order_by=[desc(CREATED_AT)])]

    def update(self, work_id: str, changes: Mapping[str, Any]) -> None:
        self.accessor.update(work_id, changes)

    def delete(self, work_id: str) -> None:
        self.accessor.remove(work_id)
