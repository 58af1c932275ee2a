from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reflections_api.db.base import Base
from reflections_api.models.common import CreatedAtMixin, IntegerPrimaryKeyMixin, TimestampMixin


class Blog(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "blogs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)  # JSON document
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)

    images = relationship(
        "BlogImage",
        back_populates="blog",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BlogImage.id.desc()",
    )
    comments = relationship("Comment", back_populates="blog", cascade="all, delete-orphan", passive_deletes=True)


class BlogImage(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "blog_images"

    blog_id: Mapped[int] = mapped_column(Integer, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    image_key: Mapped[str] = mapped_column(String(512), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    alt_text: Mapped[str | None] = mapped_column(String(512), nullable=True)

    blog = relationship("Blog", back_populates="images")
