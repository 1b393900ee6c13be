# ecotrack/services/ledger.py
"""
Green-point ledger.

Every change to a user's ``green_points`` and ``badges`` goes through
``apply_points``: activity approval, event point awards and the clawback on
cancellation. Keeping it in one place is what holds the two user-level
invariants: points never drop below zero, and the badge list has no
duplicates and never loses a badge once earned.
"""

import logging
from typing import Optional

from sqlalchemy import case
from sqlalchemy.orm import Session

from ecotrack.constants.rewards import badges_for_points
from ecotrack.models.user import User

logger = logging.getLogger(__name__)


def merge_badges(current: Optional[list], earned: list) -> list:
    """Order-preserving union of the stored badges and newly earned ones."""
    return list(dict.fromkeys([*(current or []), *earned]))


def apply_points(
    db: Session, *, user_id: str, delta: int, commit: bool = True
) -> Optional[User]:
    """
    Adds ``delta`` (which may be negative) to the user's points and unions in
    any badge whose threshold the new total reaches.

    The arithmetic runs as a single UPDATE so concurrent awards cannot
    overwrite each other. Returns None if the user does not exist.
    """
    new_total = case(
        (User.green_points + delta < 0, 0),
        else_=User.green_points + delta,
    )
    matched = (
        db.query(User)
        .filter(User.id == user_id)
        .update({User.green_points: new_total}, synchronize_session=False)
    )
    if not matched:
        logger.warning(f"Point change of {delta} skipped: user {user_id} not found")
        return None

    user = db.get(User, user_id)
    db.refresh(user)

    badges = merge_badges(user.badges, badges_for_points(user.green_points))
    if badges != (user.badges or []):
        new_badges = [b for b in badges if b not in (user.badges or [])]
        user.badges = badges
        logger.info(f"User {user_id} earned badges: {', '.join(new_badges)}")

    if commit:
        db.commit()
        db.refresh(user)

    logger.info(f"Applied {delta:+d} green points to user {user_id} (now {user.green_points})")
    return user
