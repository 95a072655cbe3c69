from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

Document = dict[str, Any]
"""A stored document as a plain dict; the store-assigned identifier is under ``id``."""


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = False


def asc(field: str) -> OrderBy:
    return OrderBy(field, False)


def desc(field: str) -> OrderBy:
    return OrderBy(field, True)


class Subscription(Protocol):
    """Cancellation handle returned by ``DocumentStore.watch``."""

    def close(self) -> None:
        raise NotImplementedError


class DocumentStore(Protocol):
    """Schema-flexible per-record store over named collections.

    ``update`` and ``delete`` raise ``NotFoundError`` for unknown identifiers;
    other driver failures propagate unchanged and are translated by the
    collection accessor.
    """

    def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> None:
        raise NotImplementedError

    def find(
        self,
        collection: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> list[Document]:
        raise NotImplementedError

    def watch(
        self,
        collection: str,
        on_change: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> Subscription:
        """Push a change notification after every write to ``collection``."""

        raise NotImplementedError


def sort_documents(docs: list[Document], order_by: Optional[Sequence[OrderBy]]) -> list[Document]:
    """Stable multi-key sort; missing values sort after present ones."""
    for ob in reversed(list(order_by or [])):
        present = [d for d in docs if d.get(ob.field) is not None]
        missing = [d for d in docs if d.get(ob.field) is None]
        present.sort(key=lambda d: d[ob.field], reverse=ob.descending)
        docs = present + missing
    return docs
