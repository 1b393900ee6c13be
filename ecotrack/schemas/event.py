# ecotrack/schemas/event.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from ecotrack.constants.statuses import EventCategory, EventStatus
from ecotrack.utils.dates import ensure_aware
from .base import CamelModel
from .user import UserSummary


class EventLocation(CamelModel):
    address: Optional[str] = None
    place_name: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class ContactInfo(CamelModel):
    email: Optional[str] = None
    phone: Optional[str] = None


def _check_category(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in EventCategory.all_values():
        raise ValueError(
            f"Invalid category. Must be one of: {', '.join(EventCategory.all_values())}"
        )
    return value


class EventBase(CamelModel):
    end_date: Optional[datetime] = None
    registration_deadline: Optional[datetime] = None
    location: Optional[EventLocation] = None
    carbon_saved_estimate_kg: Optional[float] = None
    auto_approve_registrations: Optional[bool] = None
    requires_skills: Optional[List[str]] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    requirements: Optional[str] = None
    what_to_bring: Optional[str] = None
    contact_info: Optional[ContactInfo] = None

    @field_validator("end_date", "registration_deadline", "date", check_fields=False)
    @classmethod
    def normalise_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_aware(value)

    @field_validator("points_reward", check_fields=False)
    @classmethod
    def clamp_points_reward(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        return max(0, value)

    @field_validator("category", check_fields=False)
    @classmethod
    def validate_category(cls, value: Optional[str]) -> Optional[str]:
        return _check_category(value)


class EventCreate(EventBase):
    title: str = Field(..., min_length=1, json_schema_extra={"example": "Campus Tree Planting Day"})
    description: str = Field(..., min_length=1)
    date: datetime
    max_participants: int = Field(..., gt=0, description="Must be a positive integer")
    points_reward: int = 0
    category: str = EventCategory.OTHER
    status: str = EventStatus.DRAFT

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        if value not in EventStatus.all_values():
            raise ValueError(
                f"Invalid status. Must be one of: {', '.join(EventStatus.all_values())}"
            )
        return value


class EventUpdate(EventBase):
    """Partial update. Only fields present in the request body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    max_participants: Optional[int] = Field(None, gt=0)
    points_reward: Optional[int] = None
    category: Optional[str] = None
    status: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: Optional[str]) -> Optional[str]:
        # 'completed' is not settable through an update.
        if value is not None and value not in EventStatus.updatable_values():
            raise ValueError(
                f"Invalid status. Must be one of: {', '.join(EventStatus.updatable_values())}"
            )
        return value


class EventSummary(CamelModel):
    id: str
    title: str
    date: datetime
    status: str
    location: EventLocation = EventLocation()
    points_reward: int = 0


class Event(CamelModel):
    id: str
    organizer_id: str
    organizer: Optional[UserSummary] = None
    title: str
    description: str
    date: datetime
    end_date: Optional[datetime] = None
    registration_deadline: Optional[datetime] = None
    location: EventLocation = EventLocation()
    max_participants: int
    points_reward: int
    carbon_saved_estimate_kg: float
    category: str
    status: str
    auto_approve_registrations: bool
    requires_skills: List[str] = []
    images: List[str] = []
    tags: List[str] = []
    requirements: Optional[str] = None
    what_to_bring: Optional[str] = None
    contact_info: ContactInfo = ContactInfo()
    approved_registration_count: int = Field(0, validation_alias="approved_count")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventResponse(CamelModel):
    message: Optional[str] = None
    event: Event


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class EventList(CamelModel):
    events: List[Event]
    pagination: Pagination
