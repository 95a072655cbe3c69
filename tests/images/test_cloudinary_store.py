import pytest

from src.ops_dashboard.ops_dashboard.core.exceptions import ImageDeleteUnavailable, ImageUploadError
from src.ops_dashboard.ops_dashboard.images import cloudinary_store
from src.ops_dashboard.ops_dashboard.images.cloudinary_store import CloudinaryConfig, CloudinaryImageStore

URL = "https://res.cloudinary.com/demo/image/upload/v1/employees/photos/1_a.jpg"


def test_delete_without_secret_is_unavailable():
    store = CloudinaryImageStore(CloudinaryConfig(cloud_name="demo", upload_preset="p"))
    with pytest.raises(ImageDeleteUnavailable):
        store.delete(URL)


def test_delete_with_secret_calls_destroy(monkeypatch):
    calls = []

    def fake_destroy(public_id, **kwargs):
        calls.append((public_id, kwargs))
        return {"result": "ok"}

    monkeypatch.setattr(cloudinary_store.cloudinary.uploader, "destroy", fake_destroy)
    store = CloudinaryImageStore(CloudinaryConfig(cloud_name="demo", upload_preset="p", api_key="k", api_secret="s"))

    assert store.delete(URL) is True
    assert calls[0][0] == "employees/photos/1_a"
    assert calls[0][1]["api_secret"] == "s"


def test_delete_reports_missing_image(monkeypatch):
    monkeypatch.setattr(cloudinary_store.cloudinary.uploader, "destroy", lambda public_id, **kw: {"result": "not found"})
    store = CloudinaryImageStore(CloudinaryConfig(cloud_name="demo", upload_preset="p", api_key="k", api_secret="s"))
    assert store.delete(URL) is False


def test_upload_returns_secure_url(monkeypatch):
    seen = {}

    def fake_upload(file, preset, **kwargs):
        seen.update(preset=preset, name=file.name, **kwargs)
        return {"secure_url": "https://res.cloudinary.com/demo/image/upload/v1/employees/photos/x.jpg"}

    monkeypatch.setattr(cloudinary_store.cloudinary.uploader, "unsigned_upload", fake_upload)
    store = CloudinaryImageStore(CloudinaryConfig(cloud_name="demo", upload_preset="preset"))

    url = store.upload(b"jpeg", folder="employees/photos", filename="x.jpg")

    assert url.endswith("/employees/photos/x.jpg")
    assert seen["preset"] == "preset"
    assert seen["folder"] == "employees/photos"
    assert seen["name"] == "x.jpg"


def test_upload_requires_configuration():
    with pytest.raises(ImageUploadError):
        CloudinaryImageStore(CloudinaryConfig(cloud_name="", upload_preset="")).upload(b"x", folder="f", filename="a.jpg")
