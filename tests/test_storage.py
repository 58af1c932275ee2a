from pathlib import Path
from urllib.parse import parse_qs, urlparse

import pytest
from botocore.stub import Stubber

from reflections_api.core.config import Settings
from reflections_api.services.storage import StorageError, StorageService, build_storage_service, content_type_for


def _settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite+pysqlite:///:memory:",
        "storage_backend": "s3",
        "s3_bucket": "reflections-media",
        "s3_region": "us-east-1",
        "s3_access_key": "test-access",
        "s3_secret_key": "test-secret",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def s3_storage():
    storage = StorageService(_settings())
    with Stubber(storage.s3_client) as stubber:
        yield storage, stubber
        stubber.assert_no_pending_responses()


def test_content_type_for():
    assert content_type_for("png") == "image/png"
    assert content_type_for(".JPG") == "image/jpeg"
    assert content_type_for("gif") == "image/gif"


def test_s3_put_is_public_read_with_content_type(s3_storage):
    storage, stubber = s3_storage
    stubber.add_response(
        "put_object",
        {},
        {
            "Bucket": "reflections-media",
            "Key": "blogs/abc_dove.png",
            "Body": b"png-bytes",
            "ContentType": "image/png",
            "ACL": "public-read",
        },
    )

    url = storage.put_object("blogs/abc_dove.png", b"png-bytes", content_type_for("png"))

    assert url == "https://reflections-media.s3.us-east-1.amazonaws.com/blogs/abc_dove.png"


def test_s3_put_failure_is_storage_error(s3_storage):
    storage, stubber = s3_storage
    stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)

    with pytest.raises(StorageError, match="failed to upload to S3"):
        storage.put_object("blogs/abc_dove.png", b"png-bytes", "image/png")


def test_s3_delete(s3_storage):
    storage, stubber = s3_storage
    stubber.add_response("delete_object", {}, {"Bucket": "reflections-media", "Key": "blogs/abc_dove.png"})
    stubber.add_client_error("delete_object", service_error_code="AccessDenied", http_status_code=403)

    storage.delete_object("blogs/abc_dove.png")
    with pytest.raises(StorageError, match="failed to delete from S3"):
        storage.delete_object("blogs/abc_dove.png")


def test_s3_presigned_url_is_signed_for_the_key(s3_storage):
    storage, _ = s3_storage

    url = storage.presigned_url("blogs/abc_dove.png", expires_in=120)

    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    assert parsed.path.endswith("/blogs/abc_dove.png")
    assert "reflections-media" in parsed.netloc + parsed.path
    assert query.get("X-Amz-Expires", query.get("Expires", [""]))[0]
    assert any(name in query for name in ("X-Amz-Signature", "Signature"))


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({}, "https://reflections-media.s3.us-east-1.amazonaws.com/blogs/a.png"),
        ({"s3_endpoint": "http://minio:9000/"}, "http://minio:9000/reflections-media/blogs/a.png"),
        (
            {"s3_endpoint": "http://minio:9000", "s3_public_base_url": "https://cdn.example.org/"},
            "https://cdn.example.org/blogs/a.png",
        ),
    ],
)
def test_s3_public_url_shapes(overrides, expected):
    assert StorageService(_settings(**overrides)).public_url("blogs/a.png") == expected


def test_local_backend_round_trip(tmp_path: Path):
    media_dir = tmp_path / "media"
    storage = StorageService(
        _settings(storage_backend="local", media_dir=str(media_dir), media_base_url="http://localhost:8000/media/")
    )

    url = storage.put_object("blogs/abc_dove.png", b"png-bytes", "image/png")

    assert url == "http://localhost:8000/media/blogs/abc_dove.png"
    assert (media_dir / "blogs" / "abc_dove.png").read_bytes() == b"png-bytes"
    assert storage.presigned_url("blogs/abc_dove.png") == url

    storage.delete_object("blogs/abc_dove.png")
    assert not (media_dir / "blogs" / "abc_dove.png").exists()
    storage.delete_object("blogs/abc_dove.png")


def test_local_write_failure_is_storage_error(tmp_path: Path):
    media_dir = tmp_path / "media"
    storage = StorageService(_settings(storage_backend="local", media_dir=str(media_dir)))
    (media_dir / "blogs").write_bytes(b"not a directory")

    with pytest.raises(StorageError):
        storage.put_object("blogs/abc_dove.png", b"png-bytes", "image/png")


@pytest.mark.parametrize(
    "overrides",
    [{"storage_backend": "none"}, {"s3_bucket": ""}, {"storage_backend": "ftp"}],
)
def test_uploads_disabled_without_usable_backend(overrides):
    assert build_storage_service(_settings(**overrides)) is None


def test_s3_backend_is_built_when_bucket_is_set():
    storage = build_storage_service(_settings())
    assert storage is not None
    assert storage.backend == "s3"
