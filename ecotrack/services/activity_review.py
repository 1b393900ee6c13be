# ecotrack/services/activity_review.py
"""
Admin review of submitted activities: approve (credit points) or reject.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ecotrack.constants.statuses import ActivityStatus
from ecotrack.core.exceptions import Conflict, NotFound
from ecotrack.crud import crud_activity
from ecotrack.models.activity import Activity
from ecotrack.models.user import User
from ecotrack.services import ledger

logger = logging.getLogger(__name__)


def _get_pending(db: Session, activity_id: str) -> Activity:
    activity = crud_activity.activity.get(db, id=activity_id)
    if not activity:
        raise NotFound("Activity not found")
    if activity.status != ActivityStatus.PENDING:
        raise Conflict("Activity already processed")
    return activity


def approve(db: Session, *, activity_id: str, admin: User) -> Activity:
    """
    Approves a pending activity and credits its points to the submitter.

    The status change and the credit commit together.
    """
    activity = _get_pending(db, activity_id)

    if not crud_activity.activity.mark_approved(db, activity_id=activity_id):
        db.rollback()
        raise Conflict("Activity already processed")

    ledger.apply_points(db, user_id=activity.user_id, delta=activity.points, commit=False)
    db.commit()
    db.refresh(activity)

    logger.info(
        f"Activity {activity_id} approved by {admin.id}; "
        f"credited {activity.points} points to {activity.user_id}"
    )
    return activity


def reject(
    db: Session, *, activity_id: str, admin: User, comment: Optional[str]
) -> Activity:
    _get_pending(db, activity_id)

    if not crud_activity.activity.mark_rejected(
        db, activity_id=activity_id, comment=comment
    ):
        db.rollback()
        raise Conflict("Activity already processed")

    db.commit()
    activity = crud_activity.activity.get(db, id=activity_id)
    db.refresh(activity)

    logger.info(f"Activity {activity_id} rejected by {admin.id}")
    return activity
