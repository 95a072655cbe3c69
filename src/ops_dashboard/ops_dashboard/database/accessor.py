"""Generic per-collection access: timestamped writes, queries and live subscriptions.

Every failure is logged, surfaced as a transient notification and re-raised as
``StoreReadError``/``StoreWriteError`` so pages can keep working with stale data.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from ..common.datetime_utils import utc_now
from ..common.notifications import Notifier, current_notifier
from ..core.constants import CREATED_AT, UPDATED_AT
from ..core.exceptions import NotFoundError, StoreReadError, StoreWriteError
from .store import Document, DocumentStore, OrderBy

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _dedupe_by_id(docs: Sequence[Document]) -> list[Document]:
    seen: set[str] = set()
    out: list[Document] = []
    for d in docs:
        if d["id"] in seen:
            continue
        seen.add(d["id"])
        out.append(d)
    return out


class CollectionAccessor:
    def __init__(
        self,
        store: DocumentStore,
        name: str,
        *,
        notifier: Callable[[], Notifier] = current_notifier,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store = store
        self.name = name
        self._notifier = notifier
        self._clock = clock

    def add(self, record: Mapping[str, Any]) -> str:
        now = self._clock()
        data = {k: v for k, v in record.items() if k != "id"}
        data[CREATED_AT] = now
        data[UPDATED_AT] = now
        try:
            return self._store.insert(self.name, data)
        except Exception as exc:
            logger.exception("Error adding document to %s", self.name)
            self._notifier().error("Failed to add document")
            raise StoreWriteError(f"Failed to add document to {self.name}") from exc

    def update(self, doc_id: str, changes: Mapping[str, Any]) -> None:
        data = {k: v for k, v in changes.items() if k not in ("id", CREATED_AT)}
        data[UPDATED_AT] = self._clock()
        try:
            self._store.update(self.name, doc_id, data)
        except NotFoundError:
            logger.warning("Update of missing document %s/%s", self.name, doc_id)
            self._notifier().error("Failed to update document", "Record no longer exists")
            raise
        except Exception as exc:
            logger.exception("Error updating document in %s", self.name)
            self._notifier().error("Failed to update document")
            raise StoreWriteError(f"Failed to update {self.name}/{doc_id}") from exc

    def remove(self, doc_id: str) -> None:
        try:
            self._store.delete(self.name, doc_id)
        except NotFoundError:
            logger.warning("Delete of missing document %s/%s", self.name, doc_id)
            self._notifier().error("Failed to delete document", "Record no longer exists")
            raise
        except Exception as exc:
            logger.exception("Error deleting document from %s", self.name)
            self._notifier().error("Failed to delete document")
            raise StoreWriteError(f"Failed to delete {self.name}/{doc_id}") from exc

    def get(self, doc_id: str) -> Optional[Document]:
        try:
            return self._store.get(self.name, doc_id)
        except Exception as exc:
            logger.exception("Error reading %s/%s", self.name, doc_id)
            self._notifier().error(f"Failed to load {self.name}")
            raise StoreReadError(f"Failed to read {self.name}/{doc_id}") from exc

    def list(
        self,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> list[Document]:
        try:
            docs = self._store.find(self.name, where=where, order_by=order_by)
        except Exception as exc:
            logger.exception("Error fetching %s", self.name)
            self._notifier().error(f"Failed to load {self.name}")
            raise StoreReadError(f"Failed to query {self.name}") from exc
        return _dedupe_by_id(docs)

    def find_by(self, field: str, value: Any) -> list[Document]:
        return self.list(where={field: value})

    def subscribe(
        self,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
        factory: Callable[[Document], T] = lambda d: d,
        on_update: Optional[Callable[[list[T]], None]] = None,
        on_error: Optional[Callable[[StoreReadError], None]] = None,
    ) -> "LiveQuery[T]":
        live = LiveQuery(self, where=where, order_by=order_by, factory=factory, on_update=on_update, on_error=on_error)
        live.start()
        return live


class LiveQuery(Generic[T]):
    """Live, ordered, id-deduplicated view of a collection.

    Re-snapshots on every change notification from the store. The owner must
    call ``close()`` (or use it as a context manager) when the page goes away.
    """

    def __init__(
        self,
        accessor: CollectionAccessor,
        *,
        where: Optional[Mapping[str, Any]],
        order_by: Optional[Sequence[OrderBy]],
        factory: Callable[[Document], T],
        on_update: Optional[Callable[[list[T]], None]] = None,
        on_error: Optional[Callable[[StoreReadError], None]] = None,
    ):
        self._accessor = accessor
        self._where = where
        self._order_by = order_by
        self._factory = factory
        self._on_update = on_update
        self._on_error = on_error
        self._lock = threading.Lock()
        self._subscription = None
        self._closed = False

        self.data: list[T] = []
        self.error: Optional[StoreReadError] = None
        self.loading = True

    def start(self) -> None:
        store = self._accessor._store
        try:
            self._subscription = store.watch(self._accessor.name, self.refresh, self._fail)
        except Exception as exc:
            self._fail(exc)
            return
        self.refresh()

    def refresh(self) -> None:
        if self._closed:
            return
        store = self._accessor._store
        try:
            docs = store.find(self._accessor.name, where=self._where, order_by=self._order_by)
        except Exception as exc:
            self._fail(exc)
            return

        items = [self._factory(d) for d in _dedupe_by_id(docs)]
        with self._lock:
            self.data = items
            self.loading = False
            self.error = None
        if self._on_update:
            self._on_update(items)

    def _fail(self, exc: Exception) -> None:
        if self._closed:
            return
        logger.error("Error fetching %s: %s", self._accessor.name, exc)
        err = StoreReadError(f"Failed to load {self._accessor.name}")
        err.__cause__ = exc
        with self._lock:
            self.error = err
            self.loading = False
        self._accessor._notifier().error(f"Failed to load {self._accessor.name}")
        if self._on_error:
            self._on_error(err)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    def __enter__(self) -> "LiveQuery[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
