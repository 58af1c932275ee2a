from datetime import date

from sqlalchemy import Boolean, Date, Float, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from reflections_api.db.base import Base
from reflections_api.models.common import IntegerPrimaryKeyMixin, Money, TimestampMixin


class Book(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    subtitle: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False, server_default="")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    publisher: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    publication_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    pages: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    language: Mapped[str] = mapped_column(String(64), nullable=False, server_default="English")
    category: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    price: Mapped[float] = mapped_column(Money, nullable=False)
    # Not checked against price.
    sale_price: Mapped[float | None] = mapped_column(Money, nullable=True)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    status: Mapped[str] = mapped_column(String(32), nullable=False, server_default="available", index=True)

    cover_image: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    gallery_images: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document
    preview_url: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    purchase_links: Mapped[str] = mapped_column(Text, nullable=False, server_default="{}")  # JSON document
    tags: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    total_sales: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, server_default="0")
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    created_by: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
