from fastapi import APIRouter, Depends

from reflections_api.api.deps import get_storage
from reflections_api.core.config import get_settings
from reflections_api.services.storage import StorageService

router = APIRouter(tags=["system"])


@router.get("/health")
def health(storage: StorageService | None = Depends(get_storage)):
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "image_upload": storage is not None,
    }
