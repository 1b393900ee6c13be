# ecotrack/api/v1/endpoints/events.py
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ecotrack.api import deps
from ecotrack.constants.statuses import EventStatus
from ecotrack.core.exceptions import NotFound
from ecotrack.crud import crud_event
from ecotrack.db.session import get_db
from ecotrack.models.user import User
from ecotrack.schemas.base import MessageResponse
from ecotrack.schemas.event import EventCreate, EventList, EventResponse, EventUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])

ALL = "all"


@router.get("", response_model=EventList)
def list_events(
    status: Optional[str] = None,
    category: Optional[str] = None,
    upcoming: bool = False,
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(deps.get_current_user_optional),
):
    """
    Paginated event listing sorted by date. Anonymous callers and regular
    users only ever see published events; admins may filter by any status.
    """
    is_admin = current_user is not None and current_user.is_admin
    if not is_admin:
        status_filter = EventStatus.PUBLISHED
    else:
        status_filter = status if status and status != ALL else None
    category_filter = category if category and category != ALL else None

    skip = (page - 1) * limit
    events, total = crud_event.event.get_multi_filtered(
        db,
        status=status_filter,
        category=category_filter,
        upcoming=upcoming,
        skip=skip,
        limit=limit,
    )
    return {
        "events": events,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    event = crud_event.event.create_with_organizer(
        db, obj_in=event_in, organizer_id=current_admin.id
    )
    logger.info(f"Event {event.id} created by {current_admin.id} ({event.status})")
    return {"message": "Event created successfully", "event": event}


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(deps.get_current_user_optional),
):
    event = crud_event.event.get(db, id=event_id)
    if not event:
        raise NotFound("Event not found")
    is_admin = current_user is not None and current_user.is_admin
    if event.status != EventStatus.PUBLISHED and not is_admin:
        raise NotFound("Event not found or not published")
    return {"event": event}


@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: str,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    event = crud_event.event.get(db, id=event_id)
    if not event:
        raise NotFound("Event not found")
    event = crud_event.event.update(db, db_obj=event, obj_in=event_in)
    logger.info(f"Event {event_id} updated by {current_admin.id}; status now {event.status}")
    return {"message": "Event updated successfully", "event": event}


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    """Hard delete. Registrations for the event are left in place."""
    if not crud_event.event.remove(db, id=event_id):
        raise NotFound("Event not found")
    logger.info(f"Event {event_id} deleted by {current_admin.id}")
    return {"message": "Event deleted successfully"}
