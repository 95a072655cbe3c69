from __future__ import annotations

from typing import Protocol


class ImageStore(Protocol):
    def upload(self, data: bytes, *, folder: str, filename: str) -> str:
        """Store the image and return its public URL."""

        raise NotImplementedError

    def delete(self, url: str) -> bool:
        """Delete by URL. True when removed, False when the store had no such image.

        Raises ``ImageDeleteUnavailable`` when no privileged credential is configured.
        """

        raise NotImplementedError
