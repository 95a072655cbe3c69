from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Optional

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from ..core.exceptions import ImageDeleteUnavailable, ImageUploadError
from .store import ImageStore
from .urls import extract_public_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloudinaryConfig:
    cloud_name: str
    upload_preset: str
    api_key: Optional[str] = None
    api_secret: Optional[str] = None

    @property
    def can_delete(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)


class CloudinaryImageStore(ImageStore):
    """Unsigned uploads; deletion only when the API secret is configured server-side."""

    def __init__(self, config: CloudinaryConfig):
        self._config = config

    def upload(self, data: bytes, *, folder: str, filename: str) -> str:
        if not self._config.cloud_name or not self._config.upload_preset:
            raise ImageUploadError("Image store not configured")

        file = io.BytesIO(data)
        file.name = filename
        try:
            result = cloudinary.uploader.unsigned_upload(
                file,
                self._config.upload_preset,
                folder=folder,
                cloud_name=self._config.cloud_name,
            )
        except CloudinaryError as exc:
            logger.error("Upload to %s failed: %s", folder, exc)
            raise ImageUploadError(f"Upload failed: {exc}") from exc

        url = result.get("secure_url")
        if not url:
            raise ImageUploadError("Upload failed: no URL in response")
        return url

    def delete(self, url: str) -> bool:
        public_id = extract_public_id(url)
        if not public_id:
            logger.warning("Could not extract public_id from URL: %s", url)
            return False
        if not self._config.can_delete:
            raise ImageDeleteUnavailable(f"Deleting {public_id} requires CLOUDINARY_API_SECRET")

        try:
            result = cloudinary.uploader.destroy(
                public_id,
                invalidate=True,
                cloud_name=self._config.cloud_name,
                api_key=self._config.api_key,
                api_secret=self._config.api_secret,
            )
        except CloudinaryError as exc:
            logger.error("Delete of %s failed: %s", public_id, exc)
            return False

        ok = result.get("result") == "ok"
        if not ok:
            logger.info("Image %s not deleted: %s", public_id, result.get("result"))
        return ok
