import logging
from collections.abc import Callable
from dataclasses import dataclass
from io import BytesIO
from pathlib import PurePath
from uuid import uuid4

from PIL import Image
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reflections_api.models.blog import Blog, BlogImage
from reflections_api.services.storage import StorageError, StorageService, content_type_for

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif"})
MAX_IMAGE_BYTES = 5 * 1024 * 1024
DEFAULT_JPEG_QUALITY = 80
KEY_PREFIX = "blogs"

_OPTIMIZE_FORMATS = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG"}


class ImageOptimizationError(Exception):
    pass


class ImageUploadError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_detail(self) -> dict:
        return {"error": self.message}


class BlogNotFoundError(ImageUploadError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Blog not found")


class UnsupportedImageTypeError(ImageUploadError):
    status_code = 415

    def __init__(self, extension: str) -> None:
        super().__init__(f"Invalid file type: {extension or 'none'}. Allowed: jpg, jpeg, png, gif")


class ImageTooLargeError(ImageUploadError):
    status_code = 413

    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"File too large: maximum {max_bytes // (1024 * 1024)}MB allowed")


class ImageStoreError(ImageUploadError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to upload image: {reason}")


class ImageRecordError(ImageUploadError):
    """The object was stored but its database row was not.

    ``cleanup_error`` is ``None`` when the stored object was deleted again, and
    holds the deletion failure otherwise so an operator can remove it by hand.
    """

    def __init__(self, image_key: str, cleanup_error: Exception | None) -> None:
        super().__init__("Failed to store image reference in database")
        self.image_key = image_key
        self.cleanup_error = cleanup_error

    def as_detail(self) -> dict:
        detail = {"error": self.message}
        if self.cleanup_error is None:
            detail["cleanup_msg"] = "Successfully cleaned up stored image"
        else:
            detail["cleanup_error"] = "Also failed to clean up stored image"
            detail["cleanup_detail"] = str(self.cleanup_error)
            detail["image_key"] = self.image_key
        return detail


@dataclass(frozen=True)
class UploadedImage:
    id: int
    image_key: str
    image_url: str


def file_extension(filename: str) -> str:
    name = PurePath(filename).name
    if "." not in name:
        return ""
    return name.rpartition(".")[2].lower()


def build_image_key(filename: str) -> str:
    return f"{KEY_PREFIX}/{uuid4()}_{PurePath(filename).name}"


def optimize_image(content: bytes, extension: str, jpeg_quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """Re-encode JPEG (lossy, at ``jpeg_quality``) or PNG (lossless) bytes.

    Raises ``ImageOptimizationError`` for any other format or undecodable input.
    """
    image_format = _OPTIMIZE_FORMATS.get(extension)
    if image_format is None:
        raise ImageOptimizationError(f"unsupported image format for optimization: {extension}")

    try:
        with Image.open(BytesIO(content)) as image:
            output = BytesIO()
            if image_format == "JPEG":
                converted = image if image.mode in ("RGB", "L", "CMYK") else image.convert("RGB")
                converted.save(output, format="JPEG", quality=jpeg_quality, optimize=True)
            else:
                image.save(output, format="PNG", optimize=True)
            return output.getvalue()
    except Exception as ex:
        raise ImageOptimizationError(f"failed to re-encode image: {ex}") from ex


class ImageUploadPipeline:
    def __init__(
        self,
        db: Session,
        storage: StorageService,
        *,
        max_bytes: int = MAX_IMAGE_BYTES,
        jpeg_quality: int = DEFAULT_JPEG_QUALITY,
        optimizer: Callable[[bytes, str, int], bytes] = optimize_image,
    ) -> None:
        self.db = db
        self.storage = storage
        self.max_bytes = max_bytes
        self.jpeg_quality = jpeg_quality
        self.optimizer = optimizer

    def validate(self, blog_id: int, filename: str, size: int) -> str:
        blog_exists = self.db.scalar(select(Blog.id).where(Blog.id == blog_id))
        if blog_exists is None:
            raise BlogNotFoundError()

        extension = file_extension(filename)
        if extension not in ALLOWED_EXTENSIONS:
            raise UnsupportedImageTypeError(extension)

        if size > self.max_bytes:
            raise ImageTooLargeError(self.max_bytes)
        return extension

    def prepare(self, content: bytes, extension: str) -> bytes:
        if extension == "gif":
            return content
        try:
            return self.optimizer(content, extension, self.jpeg_quality)
        except ImageOptimizationError as ex:
            logger.warning("Image optimization failed: %s, using original", ex)
            return content

    def upload(self, blog_id: int, filename: str, content: bytes, alt_text: str | None = None) -> UploadedImage:
        extension = self.validate(blog_id, filename, len(content))
        image_key = build_image_key(filename)
        payload = self.prepare(content, extension)

        try:
            image_url = self.storage.put_object(image_key, payload, content_type_for(extension))
        except StorageError as ex:
            logger.error("Upload of %s failed: %s", image_key, ex)
            raise ImageStoreError(str(ex)) from ex

        try:
            image = BlogImage(blog_id=blog_id, image_key=image_key, image_url=image_url, alt_text=alt_text or None)
            self.db.add(image)
            self.db.commit()
            self.db.refresh(image)
        except SQLAlchemyError as ex:
            self.db.rollback()
            logger.exception("Recording image %s for blog %s failed", image_key, blog_id)
            raise ImageRecordError(image_key, self._cleanup(image_key)) from ex

        return UploadedImage(id=image.id, image_key=image_key, image_url=image_url)

    def _cleanup(self, image_key: str) -> Exception | None:
        try:
            self.storage.delete_object(image_key)
        except StorageError as ex:
            logger.error("Orphaned object %s could not be deleted: %s", image_key, ex)
            return ex
        logger.info("Deleted orphaned object %s", image_key)
        return None
