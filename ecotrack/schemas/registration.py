# ecotrack/schemas/registration.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from ecotrack.constants.statuses import RegistrationStatus
from .base import CamelModel
from .event import EventSummary

TshirtSize = Literal["XS", "S", "M", "L", "XL", "XXL"]


class EmergencyContact(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


class RegistrationCreate(CamelModel):
    """Optional volunteer details a user may attach when registering."""

    notes: Optional[str] = None
    skills: List[str] = []
    emergency_contact: Optional[EmergencyContact] = None
    dietary_restrictions: Optional[str] = None
    tshirt_size: Optional[TshirtSize] = None
    volunteer_role: Optional[str] = None


class RegistrationUpdate(CamelModel):
    status: Optional[str] = None
    admin_comment: Optional[str] = None
    notes: Optional[str] = None
    volunteer_role: Optional[str] = None
    points_awarded: Optional[int] = Field(None, ge=0)
    checked_in: Optional[bool] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in RegistrationStatus.all_values():
            raise ValueError(
                f"Invalid status. Must be one of: {', '.join(RegistrationStatus.all_values())}"
            )
        return value


class BulkRegistrationAction(CamelModel):
    action: Optional[str] = None
    registration_ids: List[str] = []
    points_to_award: Optional[int] = None


class RegistrationUser(CamelModel):
    id: str
    name: str
    email: str
    green_points: int = 0


class Registration(CamelModel):
    id: str
    event_id: str
    user_id: str
    user: Optional[RegistrationUser] = None
    event: Optional[EventSummary] = None
    status: str
    registered_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None
    notes: Optional[str] = None
    skills: List[str] = []
    emergency_contact: Optional[EmergencyContact] = None
    dietary_restrictions: Optional[str] = None
    tshirt_size: Optional[str] = None
    volunteer_role: Optional[str] = None
    points_awarded: int = 0
    points_awarded_at: Optional[datetime] = None
    admin_comment: Optional[str] = None


class RegistrationResponse(CamelModel):
    # Forbidding extras keeps this distinguishable from RegistrationList when
    # both are offered as one response model.
    model_config = ConfigDict(extra="forbid")

    message: Optional[str] = None
    registration: Optional[Registration] = None


class RegistrationList(CamelModel):
    registrations: List[Registration]


class BulkResults(CamelModel):
    success: int = 0
    failed: int = 0


class BulkActionResponse(CamelModel):
    message: str
    results: BulkResults
