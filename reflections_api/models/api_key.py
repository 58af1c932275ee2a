from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from reflections_api.db.base import Base
from reflections_api.models.common import CreatedAtMixin, IntegerPrimaryKeyMixin


class ApiKey(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "api_keys"

    key_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
