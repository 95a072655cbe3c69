from __future__ import annotations

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from ..core.constants import IMAGE_JPEG_QUALITY, IMAGE_MAX_HEIGHT, IMAGE_MAX_WIDTH
from ..core.exceptions import ValidationError


def compress_image(
    data: bytes,
    *,
    max_width: int = IMAGE_MAX_WIDTH,
    max_height: int = IMAGE_MAX_HEIGHT,
    quality: int = IMAGE_JPEG_QUALITY,
) -> bytes:
    """Resize to fit the box keeping aspect ratio and re-encode as JPEG."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError):
        raise ValidationError("File is not a valid image")

    img = ImageOps.exif_transpose(img).convert("RGB")
    img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)

    out = io.BytesIO()
    img.save(out, format="JPEG", quality=quality, optimize=True)
    return out.getvalue()


def size_kb(data: bytes) -> int:
    return round(len(data) / 1024)
