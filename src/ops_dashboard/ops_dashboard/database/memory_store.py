from __future__ import annotations

import copy
import logging
import threading
import uuid
from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.exceptions import NotFoundError
from .store import Document, OrderBy, sort_documents

logger = logging.getLogger(__name__)


class _Watch:
    def __init__(self, store: "InMemoryDocumentStore", collection: str, on_change: Callable[[], None]):
        self._store = store
        self._collection = collection
        self.on_change = on_change
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._store._remove_watch(self._collection, self)


class InMemoryDocumentStore:
    """Dict-backed document store used by the testing settings and unit tests.

    Change notifications are delivered synchronously after the write, outside
    the store lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._collections: dict[str, dict[str, Document]] = {}
        self._watches: dict[str, list[_Watch]] = {}

    def _coll(self, collection: str) -> dict[str, Document]:
        return self._collections.setdefault(collection, {})

    def _notify(self, collection: str) -> None:
        with self._lock:
            watches = list(self._watches.get(collection, []))
        for w in watches:
            if not w.closed:
                w.on_change()

    def _remove_watch(self, collection: str, watch: _Watch) -> None:
        with self._lock:
            items = self._watches.get(collection, [])
            if watch in items:
                items.remove(watch)

    def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex[:20]
        with self._lock:
            doc = copy.deepcopy(dict(data))
            doc["id"] = doc_id
            self._coll(collection)[doc_id] = doc
        self._notify(collection)
        return doc_id

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with self._lock:
            doc = self._coll(collection).get(doc_id)
            return copy.deepcopy(doc) if doc else None

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        with self._lock:
            doc = self._coll(collection).get(doc_id)
            if doc is None:
                raise NotFoundError(f"{collection}/{doc_id} does not exist")
            doc.update(copy.deepcopy({k: v for k, v in fields.items() if k != "id"}))
        self._notify(collection)

    def delete(self, collection: str, doc_id: str) -> None:
        with self._lock:
            if self._coll(collection).pop(doc_id, None) is None:
                raise NotFoundError(f"{collection}/{doc_id} does not exist")
        self._notify(collection)

    def find(
        self,
        collection: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> list[Document]:
        with self._lock:
            docs = [
                copy.deepcopy(d)
                for d in self._coll(collection).values()
                if all(d.get(k) == v for k, v in (where or {}).items())
            ]
        return sort_documents(docs, order_by)

    def watch(
        self,
        collection: str,
        on_change: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> _Watch:
        w = _Watch(self, collection, on_change)
        with self._lock:
            self._watches.setdefault(collection, []).append(w)
        return w

    def watcher_count(self, collection: str) -> int:
        with self._lock:
            return len(self._watches.get(collection, []))
