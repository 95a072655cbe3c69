from src.ops_dashboard.ops_dashboard.images.urls import extract_public_id, optimize_url, thumbnail_url

URL = "https://res.cloudinary.com/demo/image/upload/v1712345678/employees/photos/1712_photo.jpg"


def test_extract_public_id_strips_version_and_extension():
    assert extract_public_id(URL) == "employees/photos/1712_photo"


def test_extract_public_id_strips_transformations():
    url = "https://res.cloudinary.com/demo/image/upload/w_400,h_400,c_limit,q_auto:good/v1/employees/aadhar/x.png"
    assert extract_public_id(url) == "employees/aadhar/x"


def test_extract_public_id_rejects_foreign_urls():
    assert extract_public_id("https://example.com/a.jpg") is None
    assert extract_public_id("") is None
    assert extract_public_id(None) is None


def test_optimize_url_inserts_transformation_once():
    optimized = optimize_url(URL)
    assert "/upload/w_400,h_400,c_limit,q_auto:good,f_auto/v1712345678/" in optimized
    assert optimize_url(optimized) == optimized
    assert extract_public_id(optimized) == "employees/photos/1712_photo"


def test_non_hosted_urls_untouched():
    assert optimize_url("https://example.com/a.jpg") == "https://example.com/a.jpg"
    assert "w_150,h_150,c_fill" in thumbnail_url(URL)
