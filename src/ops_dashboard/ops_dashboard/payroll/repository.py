from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..core.constants import CREATED_AT
from ..database.accessor import CollectionAccessor
from ..database.store import desc
from .model import UpadRecord


class UpadRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[UpadRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[UpadRecord]:
        raise NotImplementedError


class StoreUpadRepository(UpadRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def list_all(self) -> Sequence[UpadRecord]:
        return [UpadRecord.from_doc(d) for d in self.accessor.list(order_by=[desc(CREATED_AT)])]

    def list_for_employee(self, employee_id: str) -> Sequence[UpadRecord]:
        docs = self.accessor.list(where={"employeeId": employee_id}, order_by=[desc(CREATED_AT)])
        return [UpadRecord.from_doc(d) for d in docs]
