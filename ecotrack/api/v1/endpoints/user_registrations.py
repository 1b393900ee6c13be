# ecotrack/api/v1/endpoints/user_registrations.py
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ecotrack.api import deps
from ecotrack.core.exceptions import ValidationError
from ecotrack.db.session import get_db
from ecotrack.models.user import User
from ecotrack.schemas.base import MessageResponse
from ecotrack.schemas.registration import RegistrationList, RegistrationResponse
from ecotrack.services import registration_workflow

router = APIRouter(prefix="/user/registrations", tags=["My Registrations"])


@router.get("", response_model=Union[RegistrationResponse, RegistrationList])
def read_my_registrations(
    event_id: Optional[str] = Query(None, alias="eventId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """With ``eventId``, the caller's registration for that event (or null)."""
    if event_id:
        registration = registration_workflow.get_for_user(
            db, user=current_user, event_id=event_id
        )
        return {"registration": registration}
    registrations = registration_workflow.list_for_user(db, user=current_user)
    return {"registrations": registrations}


@router.delete("", response_model=MessageResponse)
def cancel_my_registration(
    registration_id: Optional[str] = Query(None, alias="registrationId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    if not registration_id:
        raise ValidationError("Registration ID required")
    registration_workflow.cancel(
        db, registration_id=registration_id, actor=current_user, self_service=True
    )
    return {"message": "Registration cancelled successfully"}
