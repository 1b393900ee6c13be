# ecotrack/api/v1/endpoints/activities.py
import json
import logging
from typing import Callable, List, Optional, Union

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from ecotrack.api import deps
from ecotrack.constants.statuses import ActivityStatus
from ecotrack.core.exceptions import NotFound, Unauthenticated, ValidationError
from ecotrack.crud import crud_activity
from ecotrack.db.session import get_db
from ecotrack.models.user import User
from ecotrack.schemas.activity import (
    ActivityList,
    ActivityLocation,
    ActivityReject,
    ActivityResponse,
)
from ecotrack.services import activity_review
from ecotrack.utils.ids import looks_like_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activities", tags=["Activities"])

RECENT_ACTIVITY_LIMIT = 20


def _parse_location(raw: Optional[str]) -> ActivityLocation:
    if not raw:
        return ActivityLocation()
    try:
        return ActivityLocation.model_validate(json.loads(raw))
    except (json.JSONDecodeError, PydanticValidationError):
        raise ValidationError("Invalid location JSON")


@router.post("", response_model=ActivityResponse)
def submit_activity(
    type: str = Form(...),
    description: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
    upload: Callable = Depends(deps.get_image_uploader),
):
    """
    Submits an activity for review. Photos are stored in the configured
    bucket; the activity starts out pending with points taken from the
    per-type table.
    """
    parsed_location = _parse_location(location)

    image_urls = []
    for image in images or []:
        if not image.filename:
            continue
        image_urls.append(upload(image.file, image.filename, image.content_type))

    activity = crud_activity.activity.create_for_user(
        db,
        user_id=current_user.id,
        activity_type=type,
        description=description,
        location=parsed_location,
        images=image_urls,
    )
    logger.info(f"User {current_user.id} submitted activity {activity.id} ({type})")
    return {"activity": activity}


@router.get("", response_model=ActivityList)
def list_activities(status: Optional[str] = None, db: Session = Depends(get_db)):
    """The 20 most recent activities, optionally filtered by status."""
    activities = crud_activity.activity.get_multi_by_status(
        db, status=status, limit=RECENT_ACTIVITY_LIMIT
    )
    return {"activities": activities}


@router.get("/pending", response_model=ActivityList)
def list_pending_activities(
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    activities = crud_activity.activity.get_multi_by_status(
        db, status=ActivityStatus.PENDING
    )
    return {"activities": activities}


@router.get("/user/{user_id}", response_model=ActivityList)
def list_user_activities(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(deps.get_current_user_optional),
):
    """Activities of one user, newest first. ``me`` resolves to the caller."""
    if user_id == "me":
        if current_user is None:
            raise Unauthenticated("Unauthorized")
        user_id = current_user.id
    return {"activities": crud_activity.activity.get_multi_by_user(db, user_id=user_id)}


class StatusLookup(str):
    """A path value naming an activity status."""


class IdLookup(str):
    """A path value shaped like an activity id."""


def _classify_lookup(value: str) -> Union[StatusLookup, IdLookup]:
    slug = value.lower()
    if ActivityStatus.is_valid(slug):
        return StatusLookup(slug)
    if looks_like_id(value, "act"):
        return IdLookup(value)
    raise ValidationError("Invalid parameter")


@router.get("/{lookup}", response_model=Union[ActivityList, ActivityResponse])
def get_activity_or_status(lookup: str, db: Session = Depends(get_db)):
    """
    ``/activities/approved`` lists every activity in that status;
    ``/activities/act_...`` returns a single activity.
    """
    target = _classify_lookup(lookup)
    if isinstance(target, StatusLookup):
        return {"activities": crud_activity.activity.get_multi_by_status(db, status=str(target))}

    activity = crud_activity.activity.get(db, id=str(target))
    if not activity:
        raise NotFound("Activity not found")
    return {"activity": activity}


@router.post("/{activity_id}/approve", response_model=ActivityResponse)
def approve_activity(
    activity_id: str,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    activity = activity_review.approve(db, activity_id=activity_id, admin=current_admin)
    return {"message": "Activity approved successfully", "activity": activity}


@router.post("/{activity_id}/reject", response_model=ActivityResponse)
def reject_activity(
    activity_id: str,
    body: Optional[ActivityReject] = None,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    activity = activity_review.reject(
        db,
        activity_id=activity_id,
        admin=current_admin,
        comment=body.comment if body else None,
    )
    return {"message": "Activity rejected", "activity": activity}
