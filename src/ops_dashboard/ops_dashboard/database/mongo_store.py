from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping, Optional, Sequence

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from ..core.exceptions import NotFoundError
from .connection import DatabaseConnection
from .store import Document, OrderBy

logger = logging.getLogger(__name__)


def _object_id(doc_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None


def _to_document(raw: Mapping[str, Any]) -> Document:
    doc = dict(raw)
    doc["id"] = str(doc.pop("_id"))
    return doc


class ChangeStreamSubscription:
    """Runs a MongoDB change stream on a daemon thread until closed.

    Change streams need a replica set; on a standalone server the stream fails
    immediately and ``on_error`` is called once.
    """

    def __init__(self, collection, on_change: Callable[[], None], on_error: Callable[[Exception], None]):
        self._collection = collection
        self._on_change = on_change
        self._on_error = on_error
        self._closed = threading.Event()
        self._thread = threading.Thread(target=self._run, name=f"watch-{collection.name}", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            with self._collection.watch(max_await_time_ms=500) as stream:
                while not self._closed.is_set() and stream.alive:
                    change = stream.try_next()
                    if change is not None and not self._closed.is_set():
                        self._on_change()
        except PyMongoError as exc:
            if not self._closed.is_set():
                logger.error("Change stream on %s failed: %s", self._collection.name, exc)
                self._on_error(exc)

    def close(self) -> None:
        self._closed.set()


class MongoDocumentStore:
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def _coll(self, collection: str):
        return self._conn.database()[collection]

    def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        payload = {k: v for k, v in data.items() if k != "id"}
        result = self._coll(collection).insert_one(payload)
        return str(result.inserted_id)

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        oid = _object_id(doc_id)
        if oid is None:
            return None
        raw = self._coll(collection).find_one({"_id": oid})
        return _to_document(raw) if raw else None

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        oid = _object_id(doc_id)
        if oid is None:
            raise NotFoundError(f"{collection}/{doc_id} does not exist")
        changes = {k: v for k, v in fields.items() if k != "id"}
        result = self._coll(collection).update_one({"_id": oid}, {"$set": changes})
        if result.matched_count == 0:
            raise NotFoundError(f"{collection}/{doc_id} does not exist")

    def delete(self, collection: str, doc_id: str) -> None:
        oid = _object_id(doc_id)
        if oid is None:
            raise NotFoundError(f"{collection}/{doc_id} does not exist")
        result = self._coll(collection).delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFoundError(f"{collection}/{doc_id} does not exist")

    def find(
        self,
        collection: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[OrderBy]] = None,
    ) -> list[Document]:
        cursor = self._coll(collection).find(dict(where or {}))
        if order_by:
            cursor = cursor.sort([(ob.field, DESCENDING if ob.descending else ASCENDING) for ob in order_by])
        return [_to_document(raw) for raw in cursor]

    def watch(
        self,
        collection: str,
        on_change: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> ChangeStreamSubscription:
        return ChangeStreamSubscription(self._coll(collection), on_change, on_error)

    def ensure_indexes(self) -> list[str]:
        """Indexes backing the cascade and per-date queries."""
        db = self._conn.database()
        return [
            db["attendance"].create_index([("employeeId", ASCENDING)]),
            db["attendance"].create_index([("date", DESCENDING)]),
            db["upads"].create_index([("employeeId", ASCENDING)]),
            db["membershipMembers"].create_index([("name", ASCENDING), ("contact", ASCENDING)]),
            db["membershipMembers"].create_index([("pendingWorkId", ASCENDING)]),
            db["pendingWorks"].create_index([("createdAt", DESCENDING)]),
            db["otherExpenses"].create_index([("date", ASCENDING)]),
        ]
