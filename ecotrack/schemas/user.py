# ecotrack/schemas/user.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Jane Smith"})
    email: str = Field(..., min_length=3, json_schema_extra={"example": "jane@example.com"})
    password: str = Field(..., min_length=1)


class UserLogin(CamelModel):
    email: str
    password: str


class UserSummary(CamelModel):
    id: str
    name: str
    email: str


class User(CamelModel):
    """A user as returned by the API. The password hash never leaves the service."""

    id: str
    name: str
    email: str
    role: str
    green_points: int = 0
    badges: List[str] = []
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    token: str
    user: User


class MeResponse(CamelModel):
    user: User
