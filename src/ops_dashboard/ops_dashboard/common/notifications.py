from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flask import g, has_app_context

from ..core.enums import NotificationLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    description: str | None = None

    def to_dict(self) -> dict:
        out = {"level": self.level.value, "message": self.message}
        if self.description:
            out["description"] = self.description
        return out


@dataclass
class Notifier:
    """Collects transient user-facing notifications for one request/page."""

    items: list[Notification] = field(default_factory=list)

    def _push(self, level: NotificationLevel, message: str, description: str | None) -> None:
        self.items.append(Notification(level=level, message=message, description=description))

    def success(self, message: str, description: str | None = None) -> None:
        self._push(NotificationLevel.SUCCESS, message, description)

    def info(self, message: str, description: str | None = None) -> None:
        self._push(NotificationLevel.INFO, message, description)

    def warning(self, message: str, description: str | None = None) -> None:
        self._push(NotificationLevel.WARNING, message, description)

    def error(self, message: str, description: str | None = None) -> None:
        logger.debug("notify error: %s", message)
        self._push(NotificationLevel.ERROR, message, description)

    def drain(self) -> list[dict]:
        out = [n.to_dict() for n in self.items]
        self.items.clear()
        return out


def current_notifier() -> Notifier:
    """Request-scoped notifier; outside a Flask app context a throwaway one is returned."""
    if has_app_context():
        if "notifier" not in g:
            g.notifier = Notifier()
        return g.notifier
    return Notifier()
