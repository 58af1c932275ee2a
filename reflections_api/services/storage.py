import logging
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from reflections_api.core.config import Settings

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
}
PRESIGNED_URL_SECONDS = 15 * 60


class StorageError(Exception):
    pass


def content_type_for(extension: str) -> str:
    return CONTENT_TYPES.get(extension.lower().lstrip("."), "image/jpeg")


class StorageService:
    """Bucket-style blob store backed by S3 or, for development, a local directory."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.backend = settings.storage_backend.lower()

        if self.backend == "s3":
            self.s3_client = boto3.client(
                "s3",
                endpoint_url=settings.s3_endpoint,
                aws_access_key_id=settings.s3_access_key,
                aws_secret_access_key=settings.s3_secret_key,
                region_name=settings.s3_region,
            )
        else:
            self.s3_client = None
            self.settings.media_path.mkdir(parents=True, exist_ok=True)

    def put_object(self, object_key: str, content: bytes, content_type: str) -> str:
        if self.backend == "s3":
            self._put_s3(object_key=object_key, content=content, content_type=content_type)
        else:
            self._put_local(object_key=object_key, content=content)
        return self.public_url(object_key)

    def delete_object(self, object_key: str) -> None:
        if self.backend == "s3":
            assert self.s3_client is not None
            try:
                self.s3_client.delete_object(Bucket=self.settings.s3_bucket, Key=object_key)
            except (BotoCoreError, ClientError) as ex:
                raise StorageError(f"failed to delete from S3: {ex}") from ex
            return

        path = self.settings.media_path / object_key
        try:
            path.unlink(missing_ok=True)
        except OSError as ex:
            raise StorageError(f"failed to delete {object_key}: {ex}") from ex

    def public_url(self, object_key: str) -> str:
        key_url = object_key.replace("\\", "/")
        if self.backend != "s3":
            return f"{self.settings.media_base_url.rstrip('/')}/{key_url}"
        if self.settings.s3_public_base_url:
            return f"{self.settings.s3_public_base_url.rstrip('/')}/{key_url}"
        if self.settings.s3_endpoint:
            return f"{self.settings.s3_endpoint.rstrip('/')}/{self.settings.s3_bucket}/{key_url}"
        return f"https://{self.settings.s3_bucket}.s3.{self.settings.s3_region}.amazonaws.com/{key_url}"

    def presigned_url(self, object_key: str, expires_in: int = PRESIGNED_URL_SECONDS) -> str:
        if self.backend != "s3":
            return self.public_url(object_key)
        assert self.s3_client is not None
        try:
            return self.s3_client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.settings.s3_bucket, "Key": object_key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as ex:
            raise StorageError(f"failed to generate presigned URL: {ex}") from ex

    def _put_local(self, object_key: str, content: bytes) -> None:
        path: Path = self.settings.media_path / object_key
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as ex:
            raise StorageError(f"failed to write {object_key}: {ex}") from ex

    def _put_s3(self, object_key: str, content: bytes, content_type: str) -> None:
        assert self.s3_client is not None
        try:
            self.s3_client.put_object(
                Bucket=self.settings.s3_bucket,
                Key=object_key,
                Body=content,
                ContentType=content_type,
                ACL="public-read",
            )
        except (BotoCoreError, ClientError) as ex:
            raise StorageError(f"failed to upload to S3: {ex}") from ex


def build_storage_service(settings: Settings) -> StorageService | None:
    """Return the configured object store, or ``None`` when image uploads are disabled."""
    backend = settings.storage_backend.lower()
    if backend == "none":
        logger.info("Object storage disabled, image uploads unavailable.")
        return None
    if backend == "s3" and not settings.s3_bucket:
        logger.info("S3_BUCKET is not set, image uploads unavailable.")
        return None
    if backend not in ("s3", "local"):
        logger.warning("Unknown storage backend %r, image uploads unavailable.", settings.storage_backend)
        return None
    return StorageService(settings)
