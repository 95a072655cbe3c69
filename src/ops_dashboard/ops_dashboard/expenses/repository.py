from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..database.accessor import CollectionAccessor
from .model import OtherExpense


class ExpenseRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[OtherExpense]:
        raise NotImplementedError


class StoreExpenseRepository(ExpenseRepository):
    def __init__(self, accessor: CollectionAccessor):
        self.accessor = accessor

    def add(self, data: Mapping[str, Any]) -> str:
        return self.accessor.add(data)

    def list_all(self) -> Sequence[OtherExpense]:
        return [OtherExpense.from_doc(d) for d in self.accessor.list()]
