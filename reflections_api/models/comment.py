from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reflections_api.db.base import Base
from reflections_api.models.common import IntegerPrimaryKeyMixin, TimestampMixin

COMMENT_STATUSES = ("pending", "approved", "rejected", "spam")


class Comment(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "comments"

    blog_id: Mapped[int] = mapped_column(Integer, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    blog_slug: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_email: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="pending", index=True)
    # Replies reference their parent; nothing prevents cycles.
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True, index=True
    )

    blog = relationship("Blog", back_populates="comments")
