from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.ops_dashboard.ops_dashboard.common.notifications import Notifier
from src.ops_dashboard.ops_dashboard.core.exceptions import NotFoundError, StoreReadError, StoreWriteError
from src.ops_dashboard.ops_dashboard.database.accessor import CollectionAccessor
from src.ops_dashboard.ops_dashboard.database.memory_store import InMemoryDocumentStore
from src.ops_dashboard.ops_dashboard.database.store import desc

FIXED = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)


class BrokenStore(InMemoryDocumentStore):
    def insert(self, collection, data):
        raise ConnectionError("network down")

    def find(self, collection, *, where=None, order_by=None):
        raise ConnectionError("network down")


def _accessor(store=None, name="employees"):
    notifier = Notifier()
    acc = CollectionAccessor(store or InMemoryDocumentStore(), name, notifier=lambda: notifier, clock=lambda: FIXED)
    return acc, notifier


def test_add_stamps_timestamps_and_returns_id():
    acc, _ = _accessor()
    doc_id = acc.add({"name": "A", "id": "ignored"})

    doc = acc.get(doc_id)
    assert doc["id"] == doc_id
    assert doc["name"] == "A"
    assert doc["createdAt"] == FIXED
    assert doc["updatedAt"] == FIXED


def test_update_merges_fields_and_keeps_created_at():
    store = InMemoryDocumentStore()
    acc, _ = _accessor(store)
    doc_id = acc.add({"name": "A", "contact": "1"})

    later = datetime(2025, 2, 1, tzinfo=timezone.utc)
    acc2 = CollectionAccessor(store, "employees", notifier=Notifier, clock=lambda: later)
    acc2.update(doc_id, {"contact": "2", "createdAt": later})

    doc = acc2.get(doc_id)
    assert doc["name"] == "A"
    assert doc["contact"] == "2"
    assert doc["createdAt"] == FIXED
    assert doc["updatedAt"] == later


def test_update_missing_id_raises_store_write_error_and_notifies():
    acc, notifier = _accessor()

    with pytest.raises(StoreWriteError) as exc:
        acc.update("missing", {"name": "x"})

    assert isinstance(exc.value, NotFoundError)
    assert notifier.drain()[0]["level"] == "error"


def test_remove_missing_id_raises():
    acc, _ = _accessor()
    with pytest.raises(NotFoundError):
        acc.remove("missing")


def test_transport_failure_is_wrapped():
    acc, notifier = _accessor(BrokenStore())

    with pytest.raises(StoreWriteError):
        acc.add({"name": "A"})
    with pytest.raises(StoreReadError):
        acc.list()

    assert [n["message"] for n in notifier.drain()] == ["Failed to add document", "Failed to load employees"]


def test_list_orders_and_filters():
    acc, _ = _accessor()
    acc.add({"name": "A", "date": "2025-01-01", "kind": "x"})
    acc.add({"name": "B", "date": "2025-01-03", "kind": "x"})
    acc.add({"name": "C", "date": "2025-01-02", "kind": "y"})

    names = [d["name"] for d in acc.list(order_by=[desc("date")])]
    assert names == ["B", "C", "A"]
    assert [d["name"] for d in acc.find_by("kind", "y")] == ["C"]


def test_live_query_follows_changes_and_releases_on_close():
    store = InMemoryDocumentStore()
    acc, _ = _accessor(store)
    snapshots = []

    live = acc.subscribe(order_by=[desc("name")], on_update=lambda items: snapshots.append([d["name"] for d in items]))
    assert live.loading is False
    assert live.data == []
    assert store.watcher_count("employees") == 1

    acc.add({"name": "A"})
    acc.add({"name": "B"})
    assert [d["name"] for d in live.data] == ["B", "A"]
    assert snapshots[-1] == ["B", "A"]

    live.close()
    live.close()
    assert live.closed
    assert store.watcher_count("employees") == 0

    acc.add({"name": "C"})
    assert [d["name"] for d in live.data] == ["B", "A"]


def test_live_query_context_manager_closes():
    store = InMemoryDocumentStore()
    acc, _ = _accessor(store)

    with acc.subscribe() as live:
        assert store.watcher_count("employees") == 1
    assert live.closed
    assert store.watcher_count("employees") == 0


def test_live_query_failure_sets_error_and_notifies():
    acc, notifier = _accessor(BrokenStore())
    errors = []

    live = acc.subscribe(on_error=errors.append)

    assert isinstance(live.error, StoreReadError)
    assert live.loading is False
    assert errors == [live.error]
    assert notifier.drain()[0]["message"] == "Failed to load employees"
    live.close()
