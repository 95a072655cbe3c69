from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import PendingWork


class PendingWorkRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, work_id: str) -> Optional[PendingWork]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PendingWork]:
        """Newest first (by creation time)."""

        raise NotImplementedError

    def update(self, work_id: str, changes: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, work_id: str) -> None:
        raise NotImplementedError
