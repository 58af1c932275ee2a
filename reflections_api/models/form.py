from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reflections_api.db.base import Base
from reflections_api.models.common import IntegerPrimaryKeyMixin, TimestampMixin


class Form(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "forms"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)  # JSON document
