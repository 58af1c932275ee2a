from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from reflections_api.schemas.common import Document


class BlogCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: dict[str, Any]
    author: str | None = Field(default=None, max_length=255)


class BlogUpdateRequest(BaseModel):
    title: str | None = Field(default=None, max_length=255)
    content: dict[str, Any] | None = None
    author: str | None = Field(default=None, max_length=255)


class BlogOut(BaseModel):
    id: int
    title: str
    content: Document
    author: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BlogImageOut(BaseModel):
    id: int
    blog_id: int
    image_key: str
    image_url: str
    alt_text: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class BlogDetail(BlogOut):
    images: list[BlogImageOut]


class ImageUploadResponse(BaseModel):
    id: int
    image_url: str
    image_key: str
