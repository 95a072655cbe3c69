from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def delete(self, employee_id: str) -> None:
        raise NotImplementedError
