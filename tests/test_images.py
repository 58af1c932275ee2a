from io import BytesIO

import pytest
from PIL import Image
from sqlalchemy.exc import OperationalError

from reflections_api.services.images import (
    BlogNotFoundError,
    ImageOptimizationError,
    ImageRecordError,
    ImageStoreError,
    ImageTooLargeError,
    ImageUploadPipeline,
    UnsupportedImageTypeError,
    build_image_key,
    file_extension,
    optimize_image,
)
from tests.conftest import RecordingStorage


class FakeSession:
    def __init__(self, blog_exists: bool = True, fail_commit: bool = False) -> None:
        self.blog_exists = blog_exists
        self.fail_commit = fail_commit
        self.added = []
        self.rolled_back = False

    def scalar(self, statement):
        return 1 if self.blog_exists else None

    def add(self, obj) -> None:
        self.added.append(obj)

    def commit(self) -> None:
        if self.fail_commit:
            raise OperationalError("INSERT INTO blog_images", {}, Exception("connection lost"))

    def refresh(self, obj) -> None:
        obj.id = 7

    def rollback(self) -> None:
        self.rolled_back = True


def _image_bytes(image_format: str, size: tuple[int, int] = (64, 48)) -> bytes:
    output = BytesIO()
    Image.new("RGB", size, (200, 120, 40)).save(output, format=image_format)
    return output.getvalue()


def _failing_optimizer(content: bytes, extension: str, quality: int) -> bytes:
    raise ImageOptimizationError("corrupt")


def test_file_extension_and_key():
    assert file_extension("Sunrise.JPG") == "jpg"
    assert file_extension("noext") == ""
    assert file_extension(".png") == "png"
    assert file_extension("uploads/photo.Final.JpEg") == "jpeg"
    key = build_image_key("sunrise.png")
    assert key.startswith("blogs/")
    assert key.endswith("_sunrise.png")
    assert build_image_key("sunrise.png") != key


def test_optimize_jpeg_and_png_stay_decodable():
    jpeg = optimize_image(_image_bytes("JPEG"), "jpg")
    png = optimize_image(_image_bytes("PNG"), "png")

    with Image.open(BytesIO(jpeg)) as image:
        assert image.format == "JPEG"
        assert image.size == (64, 48)
    with Image.open(BytesIO(png)) as image:
        assert image.format == "PNG"


def test_optimize_rejects_garbage_and_gif():
    with pytest.raises(ImageOptimizationError):
        optimize_image(b"not an image", "jpg")
    with pytest.raises(ImageOptimizationError):
        optimize_image(_image_bytes("GIF"), "gif")


def test_successful_upload_records_image():
    db = FakeSession()
    storage = RecordingStorage()
    pipeline = ImageUploadPipeline(db, storage)

    uploaded = pipeline.upload(3, "cover.png", _image_bytes("PNG"), alt_text="Cover")

    assert uploaded.id == 7
    assert storage.put_calls == [uploaded.image_key]
    assert storage.content_types[uploaded.image_key] == "image/png"
    assert uploaded.image_url == f"https://bucket.test/{uploaded.image_key}"
    assert db.added[0].blog_id == 3
    assert db.added[0].alt_text == "Cover"
    assert storage.delete_calls == []


def test_gif_is_stored_unchanged():
    storage = RecordingStorage()
    gif = _image_bytes("GIF")

    uploaded = ImageUploadPipeline(FakeSession(), storage).upload(1, "loop.gif", gif)

    assert storage.objects[uploaded.image_key] == gif
    assert storage.content_types[uploaded.image_key] == "image/gif"


def test_optimization_failure_falls_back_to_original_bytes():
    storage = RecordingStorage()
    original = b"\xff\xd8 not really a jpeg"

    uploaded = ImageUploadPipeline(FakeSession(), storage, optimizer=_failing_optimizer).upload(1, "a.jpg", original)

    assert storage.objects[uploaded.image_key] == original


def test_oversized_file_is_rejected_before_storage():
    storage = RecordingStorage()
    pipeline = ImageUploadPipeline(FakeSession(), storage)

    with pytest.raises(ImageTooLargeError) as info:
        pipeline.upload(1, "big.jpg", b"\x00" * (6 * 1024 * 1024))

    assert info.value.status_code == 413
    assert storage.put_calls == []


def test_unsupported_extension_is_rejected():
    storage = RecordingStorage()

    with pytest.raises(UnsupportedImageTypeError) as info:
        ImageUploadPipeline(FakeSession(), storage).upload(1, "scan.bmp", b"BM")

    assert info.value.status_code == 415
    assert storage.put_calls == []


def test_missing_blog_is_checked_before_any_processing():
    calls = []

    def optimizer(content, extension, quality):
        calls.append(extension)
        return content

    storage = RecordingStorage()
    pipeline = ImageUploadPipeline(FakeSession(blog_exists=False), storage, optimizer=optimizer)

    with pytest.raises(BlogNotFoundError):
        pipeline.upload(404, "photo.jpg", b"\x00" * (2 * 1024 * 1024))

    assert calls == []
    assert storage.put_calls == []


def test_storage_failure_leaves_no_record():
    db = FakeSession()
    storage = RecordingStorage(fail_put=True)

    with pytest.raises(ImageStoreError) as info:
        ImageUploadPipeline(db, storage).upload(1, "a.png", _image_bytes("PNG"))

    assert info.value.as_detail()["error"].startswith("Failed to upload image")
    assert db.added == []


def test_record_failure_deletes_stored_object():
    db = FakeSession(fail_commit=True)
    storage = RecordingStorage()

    with pytest.raises(ImageRecordError) as info:
        ImageUploadPipeline(db, storage).upload(1, "a.png", _image_bytes("PNG"))

    key = storage.put_calls[0]
    assert storage.delete_calls == [key]
    assert key not in storage.objects
    assert db.rolled_back
    detail = info.value.as_detail()
    assert detail["error"] == "Failed to store image reference in database"
    assert "cleanup_msg" in detail
    assert "image_key" not in detail


def test_record_failure_reports_failed_cleanup():
    storage = RecordingStorage(fail_delete=True)

    with pytest.raises(ImageRecordError) as info:
        ImageUploadPipeline(FakeSession(fail_commit=True), storage).upload(1, "a.png", _image_bytes("PNG"))

    detail = info.value.as_detail()
    assert detail["cleanup_error"] == "Also failed to clean up stored image"
    assert detail["cleanup_detail"] == "access denied"
    assert detail["image_key"] == storage.put_calls[0]
    assert "cleanup_msg" not in detail
