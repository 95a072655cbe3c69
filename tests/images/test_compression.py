import io

import pytest
from PIL import Image

from src.ops_dashboard.ops_dashboard.core.exceptions import ValidationError
from src.ops_dashboard.ops_dashboard.images.compression import compress_image


def _png(width: int, height: int) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", (width, height), (200, 10, 10, 128)).save(buf, format="PNG")
    return buf.getvalue()


def test_large_image_is_fitted_into_box_as_jpeg():
    out = compress_image(_png(1600, 1200))

    img = Image.open(io.BytesIO(out))
    assert img.format == "JPEG"
    assert img.size == (800, 600)
    assert img.mode == "RGB"


def test_small_image_keeps_its_size():
    img = Image.open(io.BytesIO(compress_image(_png(300, 200))))
    assert img.size == (300, 200)


def test_garbage_is_rejected():
    with pytest.raises(ValidationError):
        compress_image(b"not an image")
