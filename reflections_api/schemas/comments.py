from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

CommentStatus = Literal["pending", "approved", "rejected", "spam"]


class CommentCreateRequest(BaseModel):
    # Any "status" in the body is ignored: new comments always wait for moderation.
    blog_id: int
    blog_slug: str | None = Field(default=None, max_length=255)
    author_name: str = Field(..., min_length=1, max_length=255)
    author_email: EmailStr
    content: str = Field(..., min_length=1)
    parent_id: int | None = None


class CommentUpdateRequest(BaseModel):
    status: CommentStatus | None = None
    content: str | None = None


class CommentOut(BaseModel):
    id: int
    blog_id: int
    blog_slug: str | None
    author_name: str
    author_email: str
    content: str
    status: str
    parent_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CommentCreatedResponse(BaseModel):
    id: int
    message: str
