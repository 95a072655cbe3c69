from __future__ import annotations

import re
from typing import Optional

_UPLOAD_RE = re.compile(r"/upload/(?:v\d+/)?(.+)\.\w+$")
_TRANSFORM_PREFIXES = ("q_", "f_", "w_", "h_", "c_")


def extract_public_id(url: Optional[str]) -> Optional[str]:
    """Deletion key of a hosted image.

    ``https://res.cloudinary.com/demo/image/upload/v123/employees/photos/1_photo.jpg``
    -> ``employees/photos/1_photo``
    """
    if not url:
        return None
    m = _UPLOAD_RE.search(url)
    if not m:
        return None
    parts = m.group(1).split("/")
    # leading transformation segments may precede the version marker
    while len(parts) > 1 and parts[0].startswith(_TRANSFORM_PREFIXES):
        parts = parts[1:]
    if len(parts) > 1 and re.fullmatch(r"v\d+", parts[0]):
        parts = parts[1:]
    return "/".join(parts) or None


def optimize_url(
    url: Optional[str],
    *,
    width: int = 400,
    height: int = 400,
    quality: str = "auto:good",
    fmt: str = "auto",
    crop: str = "limit",
) -> Optional[str]:
    """Insert size/quality transformations into a hosted image URL for display."""
    if not url or "cloudinary.com" not in url:
        return url
    marker = "/upload/"
    idx = url.find(marker)
    if idx == -1:
        return url
    head, tail = url[: idx + len(marker)], url[idx + len(marker):]
    if tail.split("/", 1)[0].startswith(_TRANSFORM_PREFIXES):
        return url
    transformation = ",".join([f"w_{width}", f"h_{height}", f"c_{crop}", f"q_{quality}", f"f_{fmt}"])
    return f"{head}{transformation}/{tail}"


def thumbnail_url(url: Optional[str]) -> Optional[str]:
    return optimize_url(url, width=150, height=150, crop="fill")
