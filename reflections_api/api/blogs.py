from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from reflections_api.api.deps import get_image_pipeline, require_api_key
from reflections_api.db.session import get_db
from reflections_api.schemas.blogs import (
    BlogCreateRequest,
    BlogDetail,
    BlogImageOut,
    BlogOut,
    BlogUpdateRequest,
    ImageUploadResponse,
)
from reflections_api.schemas.common import CreatedResponse, MessageResponse
from reflections_api.services.images import ImageUploadError, ImageUploadPipeline
from reflections_api.services.resources import blogs

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogOut])
def list_blogs(db: Session = Depends(get_db)):
    return blogs.list_records(db)


@router.get("/{blog_id}", response_model=BlogDetail)
def get_blog(blog_id: int, db: Session = Depends(get_db)):
    blog = blogs.get_with_images(db, blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.get("/{blog_id}/images", response_model=list[BlogImageOut])
def list_blog_images(blog_id: int, db: Session = Depends(get_db)):
    if not blogs.exists(db, blog_id):
        raise HTTPException(status_code=404, detail="Blog not found")
    return blogs.list_images(db, blog_id)


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
def create_blog(payload: BlogCreateRequest, db: Session = Depends(get_db)):
    return CreatedResponse(id=blogs.create(db, payload))


@router.put("/{blog_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def update_blog(blog_id: int, payload: BlogUpdateRequest, db: Session = Depends(get_db)):
    if not blogs.update(db, blog_id, payload):
        raise HTTPException(status_code=404, detail="Blog not found")
    return MessageResponse(message="Blog updated successfully")


@router.delete("/{blog_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def delete_blog(blog_id: int, db: Session = Depends(get_db)):
    if not blogs.delete(db, blog_id):
        raise HTTPException(status_code=404, detail="Blog not found")
    return MessageResponse(message="Blog deleted successfully")


@router.post(
    "/{blog_id}/upload-image",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
async def upload_blog_image(
    blog_id: int,
    image: UploadFile | None = File(default=None),
    alt_text: str | None = Form(default=None),
    pipeline: ImageUploadPipeline = Depends(get_image_pipeline),
):
    if image is None:
        raise HTTPException(status_code=400, detail="Image file is required")

    content = await image.read()
    try:
        uploaded = pipeline.upload(blog_id, image.filename or "", content, alt_text)
    except ImageUploadError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.as_detail()) from exc
    return ImageUploadResponse(id=uploaded.id, image_url=uploaded.image_url, image_key=uploaded.image_key)
