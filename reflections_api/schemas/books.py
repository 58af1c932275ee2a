from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from reflections_api.schemas.common import Document


class BookCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str = Field(default="", max_length=255)
    author: str = Field(..., min_length=1, max_length=255)
    isbn: str = Field(default="", max_length=32)
    description: str = Field(..., min_length=1)
    publisher: str = Field(default="", max_length=255)
    publication_date: date | None = None
    pages: int = 0
    language: str = Field(default="English", max_length=64)
    category: str = Field(..., min_length=1, max_length=64)  # spiritual, devotional, biblical, ...

    price: float = Field(..., ge=0)
    sale_price: float | None = Field(default=None, ge=0)
    stock_quantity: int = 0
    status: str = Field(default="available", max_length=32)  # available, out_of_stock, pre_order, discontinued

    cover_image: str = Field(default="", max_length=1024)
    gallery_images: Any = None
    preview_url: str = Field(default="", max_length=1024)
    purchase_links: Any = None
    tags: Any = None

    is_featured: bool = False
    is_published: bool = False
    created_by: str = Field(default="", max_length=255)


class BookUpdateRequest(BaseModel):
    title: str | None = Field(default=None, max_length=255)
    subtitle: str | None = Field(default=None, max_length=255)
    author: str | None = Field(default=None, max_length=255)
    isbn: str | None = Field(default=None, max_length=32)
    description: str | None = None
    publisher: str | None = Field(default=None, max_length=255)
    publication_date: date | None = None
    pages: int | None = None
    language: str | None = Field(default=None, max_length=64)
    category: str | None = Field(default=None, max_length=64)

    price: float | None = Field(default=None, ge=0)
    sale_price: float | None = Field(default=None, ge=0)
    stock_quantity: int | None = None
    status: str | None = Field(default=None, max_length=32)

    cover_image: str | None = Field(default=None, max_length=1024)
    gallery_images: Any = None
    preview_url: str | None = Field(default=None, max_length=1024)
    purchase_links: Any = None
    tags: Any = None

    is_featured: bool | None = None
    is_published: bool | None = None
    total_sales: int | None = None
    average_rating: float | None = None
    review_count: int | None = None


class BookOut(BaseModel):
    id: int
    title: str
    subtitle: str
    author: str
    isbn: str
    description: str
    publisher: str
    publication_date: date | None
    pages: int
    language: str
    category: str

    price: float
    sale_price: float | None
    stock_quantity: int
    status: str

    cover_image: str
    gallery_images: Document
    preview_url: str
    purchase_links: Document
    tags: Document

    is_featured: bool
    is_published: bool
    total_sales: int
    average_rating: float
    review_count: int
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
