from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from reflections_api.schemas.common import Document


class FormCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    data: dict[str, Any]


class FormUpdateRequest(BaseModel):
    title: str | None = Field(default=None, max_length=255)
    data: dict[str, Any] | None = None


class FormOut(BaseModel):
    id: int
    title: str
    data: Document
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
