from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import CREATED_AT
from ..database.accessor import CollectionAccessor
from ..database.store import desc
from .model import Employee
from .repository import EmployeeRepository


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def get(self, employee_id: str) -> Optional[Employee]:
        doc = self.accessor.get(employee_id)
        return Employee.from_doc(doc) if doc else None

    def list_all(self) -> Sequence[Employee]:
        return [Employee.from_doc(d) for d in self.accessor.list(order_by=[desc(CREATED_AT)])]

    def delete(self, employee_id: str) -> None:
        self.accessor.remove(employee_id)
