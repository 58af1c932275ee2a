import logging

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reflections_api.core.config import get_settings
from reflections_api.core.security import extract_api_key, hash_api_key
from reflections_api.db.session import get_db
from reflections_api.models.api_key import ApiKey
from reflections_api.services.images import ImageUploadPipeline
from reflections_api.services.storage import StorageService

logger = logging.getLogger(__name__)


def require_api_key(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> None:
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authorization header required")

    api_key = extract_api_key(authorization)
    if not api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="API key required")

    try:
        key_id = db.scalar(select(ApiKey.id).where(ApiKey.key_hash == hash_api_key(api_key)))
    except SQLAlchemyError as exc:
        # Lookup failure is transient: 503, not a credential rejection.
        logger.exception("API key lookup failed")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Error validating API key") from exc

    if key_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_storage(request: Request) -> StorageService | None:
    return request.app.state.storage


def get_image_pipeline(
    db: Session = Depends(get_db),
    storage: StorageService | None = Depends(get_storage),
) -> ImageUploadPipeline:
    if storage is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Image upload service is not available. Object storage is not configured.",
        )
    settings = get_settings()
    return ImageUploadPipeline(
        db,
        storage,
        max_bytes=settings.image_max_bytes,
        jpeg_quality=settings.image_jpeg_quality,
    )
