# ecotrack/services/registration_workflow.py
"""
Event registration lifecycle.

Status flow: pending -> {approved, declined, waitlisted} -> {checked-in,
no-show}, with deletion (cancel) possible from any state. Admin updates may
set any status; the only derived transitions are the auto-approval decision
on registration and the check-in flag.

Seat accounting: an event's ``approved_count`` tracks registrations in
status 'approved'. Every status change in or out of 'approved' goes through
``_set_status`` so the counter stays in step. Points go through the ledger.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ecotrack.constants.statuses import EventStatus, RegistrationStatus
from ecotrack.core.exceptions import Conflict, Forbidden, NotFound, ValidationError
from ecotrack.crud import crud_event, crud_registration
from ecotrack.models.registration import Registration
from ecotrack.models.user import User
from ecotrack.schemas.registration import RegistrationCreate, RegistrationUpdate
from ecotrack.services import ledger
from ecotrack.utils.dates import is_past, utcnow

logger = logging.getLogger(__name__)

BULK_APPROVE = "approve"
BULK_DECLINE = "decline"
BULK_CHECK_IN = "check-in"
BULK_AWARD_POINTS = "award-points"
BULK_ACTIONS = (BULK_APPROVE, BULK_DECLINE, BULK_CHECK_IN, BULK_AWARD_POINTS)


def outcome_message(status: str) -> str:
    verb = "registered" if status == RegistrationStatus.APPROVED else status
    return f"Successfully {verb} for event"


def _set_status(db: Session, registration: Registration, new_status: str) -> None:
    old_status = registration.status
    if old_status == new_status:
        return
    if RegistrationStatus.holds_seat(old_status) and not RegistrationStatus.holds_seat(new_status):
        crud_event.event.release_seat(db, event_id=registration.event_id)
    elif RegistrationStatus.holds_seat(new_status) and not RegistrationStatus.holds_seat(old_status):
        # Admin approval is an override and is not capacity-checked.
        crud_event.event.take_seat(db, event_id=registration.event_id)
    registration.status = new_status


def _award_points(db: Session, registration: Registration, points: int) -> bool:
    """Credits ``points`` unless this registration was already awarded. Does not commit."""
    if not crud_registration.registration.award_points_once(
        db, registration_id=registration.id, points=points
    ):
        logger.info(f"Registration {registration.id} already has points; award skipped")
        return False
    ledger.apply_points(db, user_id=registration.user_id, delta=points, commit=False)
    return True


def _get_for_event(db: Session, *, event_id: str, registration_id: str) -> Registration:
    registration = crud_registration.registration.get(db, id=registration_id)
    if not registration or registration.event_id != event_id:
        raise NotFound("Registration not found")
    return registration


def register(
    db: Session, *, event_id: str, user: User, obj_in: RegistrationCreate
) -> Registration:
    """
    Registers ``user`` for a published event.

    With auto-approval on, the user is approved while seats remain and
    waitlisted once the event is full. With it off, the registration waits
    for an admin regardless of capacity.
    """
    event = crud_event.event.get(db, id=event_id)
    if not event:
        raise NotFound("Event not found")
    if event.status != EventStatus.PUBLISHED:
        raise Conflict("Event is not available for registration")
    if is_past(event.registration_deadline):
        raise Conflict("Registration deadline has passed")
    if crud_registration.registration.get_by_event_and_user(
        db, event_id=event_id, user_id=user.id
    ):
        raise Conflict("Already registered for this event")

    status = RegistrationStatus.PENDING
    if event.auto_approve_registrations:
        if crud_event.event.reserve_seat(db, event_id=event_id):
            status = RegistrationStatus.APPROVED
        else:
            status = RegistrationStatus.WAITLISTED

    try:
        registration = crud_registration.registration.create_for_event(
            db, obj_in=obj_in, event_id=event_id, user_id=user.id, status=status
        )
        db.commit()
    except IntegrityError:
        # A concurrent request for the same (event, user) won the insert.
        # Rolling back also returns any seat reserved above.
        db.rollback()
        raise Conflict("Already registered for this event")

    db.refresh(registration)
    logger.info(f"User {user.id} registration for event {event_id}: {status}")
    return registration


def list_for_event(
    db: Session, *, event_id: str, status: Optional[str] = None
) -> List[Registration]:
    if status == "all":
        status = None
    return crud_registration.registration.get_multi_by_event(
        db, event_id=event_id, status=status
    )


def list_for_user(db: Session, *, user: User) -> List[Registration]:
    return crud_registration.registration.get_multi_by_user(db, user_id=user.id)


def get_for_user(db: Session, *, user: User, event_id: str) -> Optional[Registration]:
    return crud_registration.registration.get_by_event_and_user(
        db, event_id=event_id, user_id=user.id
    )


def update_registration(
    db: Session,
    *,
    event_id: str,
    registration_id: str,
    admin: User,
    obj_in: RegistrationUpdate,
) -> Registration:
    """
    Admin patch of a single registration.

    Setting status 'approved' stamps ``approved_at``; ``checked_in`` forces
    status 'checked-in' on a registration that was not checked in yet; a
    positive ``points_awarded`` credits the user once.
    """
    registration = _get_for_event(db, event_id=event_id, registration_id=registration_id)
    data = obj_in.model_dump(exclude_unset=True)
    now = utcnow()

    for field in ("admin_comment", "notes", "volunteer_role"):
        if field in data:
            setattr(registration, field, data[field])

    new_status = data.get("status")
    if new_status and new_status != registration.status:
        _set_status(db, registration, new_status)
        if new_status == RegistrationStatus.APPROVED:
            registration.approved_at = now

    if data.get("checked_in") and not registration.checked_in_at:
        _set_status(db, registration, RegistrationStatus.CHECKED_IN)
        registration.checked_in_at = now

    points = data.get("points_awarded")
    if points and points > 0:
        _award_points(db, registration, points)

    db.commit()
    db.refresh(registration)
    logger.info(f"Registration {registration_id} updated by admin {admin.id}")
    return registration


def _apply_bulk_item(
    db: Session,
    registration: Registration,
    action: str,
    points_to_award: Optional[int],
) -> None:
    now = utcnow()
    if action == BULK_APPROVE:
        _set_status(db, registration, RegistrationStatus.APPROVED)
        registration.approved_at = now
    elif action == BULK_DECLINE:
        _set_status(db, registration, RegistrationStatus.DECLINED)
    elif action == BULK_CHECK_IN:
        _set_status(db, registration, RegistrationStatus.CHECKED_IN)
        registration.checked_in_at = now
    elif action == BULK_AWARD_POINTS:
        _award_points(db, registration, points_to_award)


def bulk_action(
    db: Session,
    *,
    event_id: str,
    admin: User,
    action: Optional[str],
    registration_ids: List[str],
    points_to_award: Optional[int] = None,
) -> dict:
    """
    Applies one action to many registrations. Each id is handled in its own
    transaction; ids that are missing, belong to another event or fail are
    counted and the batch carries on.
    """
    if not action or not registration_ids:
        raise ValidationError("Missing required fields")
    if action not in BULK_ACTIONS:
        raise ValidationError("Invalid action")
    if action == BULK_AWARD_POINTS and (not points_to_award or points_to_award <= 0):
        raise ValidationError("Invalid points amount")

    results = {"success": 0, "failed": 0}
    for registration_id in registration_ids:
        try:
            registration = crud_registration.registration.get(db, id=registration_id)
            if not registration or registration.event_id != event_id:
                results["failed"] += 1
                continue
            _apply_bulk_item(db, registration, action, points_to_award)
            db.commit()
            results["success"] += 1
        except Exception:
            db.rollback()
            logger.error(
                f"Bulk {action} failed for registration {registration_id}",
                exc_info=True,
            )
            results["failed"] += 1

    logger.info(
        f"Bulk {action} on event {event_id} by admin {admin.id}: "
        f"{results['success']} successful, {results['failed']} failed"
    )
    return results


def cancel(
    db: Session,
    *,
    registration_id: str,
    actor: User,
    event_id: Optional[str] = None,
    self_service: bool = False,
) -> None:
    """
    Deletes a registration, clawing back any awarded points and freeing the
    seat if it held one.

    Owners may cancel their own registration unless the event has already
    started. Admins may cancel any registration at any time, except through
    the self-service route, which is owner-only.
    """
    registration = crud_registration.registration.get(db, id=registration_id)
    if not registration or (event_id is not None and registration.event_id != event_id):
        raise NotFound("Registration not found")

    is_owner = registration.user_id == actor.id
    if not is_owner and (self_service or not actor.is_admin):
        raise Forbidden("Not authorized to cancel this registration")

    if self_service or not actor.is_admin:
        event = crud_event.event.get(db, id=registration.event_id)
        if event and is_past(event.date):
            raise Conflict("Cannot cancel registration for past events")

    points = registration.points_awarded or 0
    held_seat = RegistrationStatus.holds_seat(registration.status)
    owner_id = registration.user_id
    registration_event_id = registration.event_id

    if not crud_registration.registration.delete_by_id(db, registration_id=registration_id):
        db.rollback()
        raise NotFound("Registration not found")

    if points > 0:
        ledger.apply_points(db, user_id=owner_id, delta=-points, commit=False)
    if held_seat:
        crud_event.event.release_seat(db, event_id=registration_event_id)

    db.commit()
    logger.info(
        f"Registration {registration_id} cancelled by {actor.id}"
        + (f"; clawed back {points} points" if points > 0 else "")
    )
