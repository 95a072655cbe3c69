from __future__ import annotations

import queue

from src.ops_dashboard.ops_dashboard.live.controller import offer_latest


def test_offer_latest_keeps_only_newest_event():
    events: queue.Queue = queue.Queue(maxsize=1)

    for n in range(5):
        offer_latest(events, ("snapshot", [{"n": n}]))

    assert events.get_nowait() == ("snapshot", [{"n": 4}])
    assert events.empty()


def test_offer_latest_error_replaces_pending_snapshot():
    events: queue.Queue = queue.Queue(maxsize=1)
    offer_latest(events, ("snapshot", []))
    offer_latest(events, ("error", {"message": "boom"}))

    assert events.get_nowait() == ("error", {"message": "boom"})
