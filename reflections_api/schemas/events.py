from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from reflections_api.schemas.common import Document


class EventCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    event_type: str = Field(..., min_length=1, max_length=64)
    status: str = Field(default="draft", max_length=32)
    start_date: datetime
    end_date: datetime

    venue_name: str = Field(default="", max_length=255)
    venue_address: str = Field(default="", max_length=512)
    is_virtual: bool = False
    virtual_link: str = Field(default="", max_length=1024)
    timezone: str = Field(default="UTC", max_length=64)

    capacity: int = 0
    expected_guests: int = 0
    registered_count: int = 0
    actual_guests: int | None = None
    waitlist_enabled: bool = False
    allow_walkins: bool = True

    ticket_price: float = Field(default=0, ge=0)
    early_bird_price: float | None = Field(default=None, ge=0)
    organization_budget: float = Field(default=0, ge=0)
    expenses: float = Field(default=0, ge=0)
    revenue: float = Field(default=0, ge=0)

    registration_open_date: datetime | None = None
    registration_close_date: datetime | None = None
    registration_form_url: str = Field(default="", max_length=1024)
    requires_approval: bool = False

    featured_image: str = Field(default="", max_length=1024)
    gallery_images: Any = None
    video_url: str = Field(default="", max_length=1024)
    livestream_url: str = Field(default="", max_length=1024)

    organizer_name: str = Field(..., min_length=1, max_length=255)
    organizer_email: EmailStr
    organizer_phone: str = Field(default="", max_length=64)

    speakers: Any = None
    sponsors: Any = None
    tags: Any = None

    is_featured: bool = False
    is_public: bool = True
    created_by: str = Field(default="", max_length=255)


class EventUpdateRequest(BaseModel):
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    event_type: str | None = Field(default=None, max_length=64)
    status: str | None = Field(default=None, max_length=32)
    start_date: datetime | None = None
    end_date: datetime | None = None

    venue_name: str | None = Field(default=None, max_length=255)
    venue_address: str | None = Field(default=None, max_length=512)
    is_virtual: bool | None = None
    virtual_link: str | None = Field(default=None, max_length=1024)
    timezone: str | None = Field(default=None, max_length=64)

    capacity: int | None = None
    expected_guests: int | None = None
    registered_count: int | None = None
    actual_guests: int | None = None
    waitlist_enabled: bool | None = None
    allow_walkins: bool | None = None

    ticket_price: float | None = Field(default=None, ge=0)
    early_bird_price: float | None = Field(default=None, ge=0)
    organization_budget: float | None = Field(default=None, ge=0)
    expenses: float | None = Field(default=None, ge=0)
    revenue: float | None = Field(default=None, ge=0)

    registration_open_date: datetime | None = None
    registration_close_date: datetime | None = None
    registration_form_url: str | None = Field(default=None, max_length=1024)
    requires_approval: bool | None = None

    featured_image: str | None = Field(default=None, max_length=1024)
    gallery_images: Any = None
    video_url: str | None = Field(default=None, max_length=1024)
    livestream_url: str | None = Field(default=None, max_length=1024)

    organizer_name: str | None = Field(default=None, max_length=255)
    organizer_email: EmailStr | None = None
    organizer_phone: str | None = Field(default=None, max_length=64)

    speakers: Any = None
    sponsors: Any = None
    tags: Any = None

    is_featured: bool | None = None
    is_public: bool | None = None


class EventOut(BaseModel):
    id: int
    title: str
    description: str
    event_type: str
    status: str
    start_date: datetime
    end_date: datetime

    venue_name: str
    venue_address: str
    is_virtual: bool
    virtual_link: str
    timezone: str

    capacity: int
    expected_guests: int
    registered_count: int
    actual_guests: int | None
    waitlist_enabled: bool
    allow_walkins: bool

    ticket_price: float
    early_bird_price: float | None
    organization_budget: float
    expenses: float
    revenue: float

    registration_open_date: datetime | None
    registration_close_date: datetime | None
    registration_form_url: str
    requires_approval: bool

    featured_image: str
    gallery_images: Document
    video_url: str
    livestream_url: str

    organizer_name: str
    organizer_email: str
    organizer_phone: str

    speakers: Document
    sponsors: Document
    tags: Document

    is_featured: bool
    is_public: bool
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
