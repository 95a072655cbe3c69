from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.accessor import CollectionAccessor
from ..database.store import desc
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def get(self, record_id: str) -> Optional[AttendanceRecord]:
        doc = self.accessor.get(record_id)
        return AttendanceRecord.from_doc(doc) if doc else None

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_doc(d) for d in self.accessor.list(order_by=[desc("date")])]

    def list_for_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_doc(d) for d in self.accessor.find_by("date", work_date)]

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_doc(d) for d in self.accessor.find_by("employeeId", employee_id)]

    def update(self, record_id: str, changes: Mapping[str, Any]) -> None:
        self.accessor.update(record_id, changes)

    def delete(self, record_id: str) -> None:
        self.accessor.remove(record_id)
