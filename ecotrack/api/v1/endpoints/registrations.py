# ecotrack/api/v1/endpoints/registrations.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ecotrack.api import deps
from ecotrack.core.exceptions import NotFound
from ecotrack.crud import crud_event
from ecotrack.db.session import get_db
from ecotrack.models.user import User
from ecotrack.schemas.base import MessageResponse
from ecotrack.schemas.registration import (
    BulkActionResponse,
    BulkRegistrationAction,
    RegistrationCreate,
    RegistrationList,
    RegistrationResponse,
    RegistrationUpdate,
)
from ecotrack.services import registration_workflow

router = APIRouter(prefix="/events/{event_id}/register", tags=["Registrations"])


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
def register_for_event(
    event_id: str,
    registration_in: Optional[RegistrationCreate] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Registers the caller. The outcome (approved, waitlisted or pending)
    depends on the event's auto-approval setting and remaining capacity.
    """
    registration = registration_workflow.register(
        db,
        event_id=event_id,
        user=current_user,
        obj_in=registration_in or RegistrationCreate(),
    )
    return {
        "message": registration_workflow.outcome_message(registration.status),
        "registration": registration,
    }


@router.get("", response_model=RegistrationList)
def list_event_registrations(
    event_id: str,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    if not crud_event.event.get(db, id=event_id):
        raise NotFound("Event not found")
    registrations = registration_workflow.list_for_event(
        db, event_id=event_id, status=status
    )
    return {"registrations": registrations}


@router.post("/bulk", response_model=BulkActionResponse)
def bulk_update_registrations(
    event_id: str,
    action_in: BulkRegistrationAction,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    results = registration_workflow.bulk_action(
        db,
        event_id=event_id,
        admin=current_admin,
        action=action_in.action,
        registration_ids=action_in.registration_ids,
        points_to_award=action_in.points_to_award,
    )
    return {
        "message": (
            f"Bulk operation completed. {results['success']} successful, "
            f"{results['failed']} failed."
        ),
        "results": results,
    }


@router.put("/{registration_id}", response_model=RegistrationResponse)
def update_registration(
    event_id: str,
    registration_id: str,
    registration_in: RegistrationUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(deps.get_current_admin),
):
    registration = registration_workflow.update_registration(
        db,
        event_id=event_id,
        registration_id=registration_id,
        admin=current_admin,
        obj_in=registration_in,
    )
    return {"message": "Registration updated successfully", "registration": registration}


@router.delete("/{registration_id}", response_model=MessageResponse)
def cancel_registration(
    event_id: str,
    registration_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """Owner or admin. Non-admins cannot cancel once the event has started."""
    registration_workflow.cancel(
        db, registration_id=registration_id, actor=current_user, event_id=event_id
    )
    return {"message": "Registration cancelled successfully"}
