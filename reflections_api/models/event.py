from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, true
from sqlalchemy.orm import Mapped, mapped_column

from reflections_api.db.base import Base
from reflections_api.models.common import IntegerPrimaryKeyMixin, Money, TimestampMixin


class Event(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    event_type: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, server_default="draft", index=True)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    venue_name: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    venue_address: Mapped[str] = mapped_column(String(512), nullable=False, server_default="")
    is_virtual: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    virtual_link: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, server_default="UTC")

    capacity: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    expected_guests: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    registered_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    actual_guests: Mapped[int | None] = mapped_column(Integer, nullable=True)
    waitlist_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    allow_walkins: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=true())

    ticket_price: Mapped[float] = mapped_column(Money, nullable=False, server_default="0")
    early_bird_price: Mapped[float | None] = mapped_column(Money, nullable=True)
    organization_budget: Mapped[float] = mapped_column(Money, nullable=False, server_default="0")
    expenses: Mapped[float] = mapped_column(Money, nullable=False, server_default="0")
    revenue: Mapped[float] = mapped_column(Money, nullable=False, server_default="0")

    registration_open_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    registration_close_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    registration_form_url: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    requires_approval: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())

    featured_image: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    gallery_images: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document
    video_url: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")
    livestream_url: Mapped[str] = mapped_column(String(1024), nullable=False, server_default="")

    organizer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    organizer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    organizer_phone: Mapped[str] = mapped_column(String(64), nullable=False, server_default="")

    speakers: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document
    sponsors: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document
    tags: Mapped[str] = mapped_column(Text, nullable=False, server_default="[]")  # JSON document

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=false())
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=true())
    created_by: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
