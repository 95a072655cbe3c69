"""Server-sent event stream of live collection snapshots."""
from __future__ import annotations

import json
import logging
import queue
from datetime import date, datetime

from flask import Flask, Response

from ..common.web import fail, login_required
from ..container import Container
from ..core.constants import ALL_COLLECTIONS

logger = logging.getLogger(__name__)

KEEPALIVE_SECONDS = 15


def _json_default(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def sse_event(event: str, payload) -> str:
    return f"event: {event}\ndata: {json.dumps(payload, default=_json_default)}\n\n"


def offer_latest(events: queue.Queue, item) -> None:
    """Put ``item``, dropping the older pending event; snapshots are full copies."""
    while True:
        try:
            events.put_nowait(item)
            return
        except queue.Full:
            try:
                events.get_nowait()
            except queue.Empty:
                pass


def register(app: Flask, container: Container) -> None:
    @app.route("/api/live/<collection>", endpoint="live_collection")
    @login_required(container.auth_service)
    def live_collection(collection: str):
        if collection not in ALL_COLLECTIONS:
            return fail(f"Unknown collection: {collection}", 404)

        events: queue.Queue = queue.Queue(maxsize=1)
        live = container.accessors[collection].subscribe(
            on_update=lambda docs: offer_latest(events, ("snapshot", docs)),
            on_error=lambda err: offer_latest(events, ("error", {"message": str(err)})),
        )

        def stream():
            try:
                if live.error is not None:
                    yield sse_event("error", {"message": str(live.error)})
                while True:
                    try:
                        event, payload = events.get(timeout=KEEPALIVE_SECONDS)
                    except queue.Empty:
                        yield ": keepalive\n\n"
                        continue
                    yield sse_event(event, payload)
            finally:
                # client went away
                live.close()
                logger.debug("Live stream for %s closed", collection)

        return Response(stream(), mimetype="text/event-stream", headers={"Cache-Control": "no-cache"})
