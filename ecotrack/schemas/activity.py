# ecotrack/schemas/activity.py
from datetime import datetime
from typing import List, Optional

from .base import CamelModel
from .user import UserSummary


class ActivityLocation(CamelModel):
    place_name: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class Activity(CamelModel):
    id: str
    user_id: str
    user: Optional[UserSummary] = None
    type: str
    description: Optional[str] = None
    location: ActivityLocation = ActivityLocation()
    images: List[str] = []
    points: int
    carbon_saved_estimate_kg: float
    status: str
    admin_comment: Optional[str] = None
    created_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None


class ActivityResponse(CamelModel):
    message: Optional[str] = None
    activity: Activity


class ActivityList(CamelModel):
    activities: List[Activity]


class ActivityReject(CamelModel):
    comment: Optional[str] = None
