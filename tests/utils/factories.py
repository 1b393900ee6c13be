# tests/utils/factories.py
"""Helpers that write rows straight to the test database."""
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ecotrack.core.security import hash_password
from ecotrack.models import Activity, Event, Registration, User
from ecotrack.utils.dates import utcnow

DEFAULT_PASSWORD = "password123"


def create_user(
    db: Session,
    *,
    name: str = "Test User",
    email: str = "user@test.com",
    role: str = "user",
    green_points: int = 0,
    badges: Optional[list] = None,
    password: str = DEFAULT_PASSWORD,
) -> User:
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        green_points=green_points,
        badges=badges or [],
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_event(db: Session, *, organizer: User, **overrides) -> Event:
    values = {
        "title": "Campus Cleanup",
        "description": "Pick up litter around the quad",
        "date": utcnow() + timedelta(days=7),
        "max_participants": 10,
        "points_reward": 25,
        "carbon_saved_estimate_kg": 0.0,
        "category": "cleanup",
        "status": "published",
        "auto_approve_registrations": True,
        "location": {"placeName": "Main Quad"},
        "requires_skills": [],
        "images": [],
        "tags": [],
        "contact_info": {},
        "approved_count": 0,
    }
    values.update(overrides)
    event = Event(organizer_id=organizer.id, **values)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def create_activity(
    db: Session,
    *,
    user: User,
    type: str = "recycling",
    points: int = 30,
    status: str = "pending",
    description: str = "Recycled 5kg of plastic",
) -> Activity:
    activity = Activity(
        user_id=user.id,
        type=type,
        description=description,
        location={"placeName": "Library"},
        images=[],
        points=points,
        carbon_saved_estimate_kg=2.5,
        status=status,
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)
    return activity


def create_registration(
    db: Session,
    *,
    event: Event,
    user: User,
    status: str = "approved",
    points_awarded: int = 0,
) -> Registration:
    """Inserts a registration and keeps the event's seat counter in step."""
    registration = Registration(
        event_id=event.id,
        user_id=user.id,
        status=status,
        skills=[],
        points_awarded=points_awarded,
        approved_at=utcnow() if status == "approved" else None,
    )
    db.add(registration)
    if status == "approved":
        event.approved_count = (event.approved_count or 0) + 1
    db.commit()
    db.refresh(registration)
    return registration
