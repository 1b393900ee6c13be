# ecotrack/api/v1/endpoints/badges.py
from fastapi import APIRouter

from ecotrack.constants.rewards import BADGE_THRESHOLDS
from ecotrack.schemas.badge import BadgeList

router = APIRouter(prefix="/badges", tags=["Badges"])


@router.get("", response_model=BadgeList)
def list_badges():
    badges = [
        {
            "name": badge["name"],
            "icon": badge["icon"],
            "required_points": badge["points"],
            "description": f"Earn {badge['points']} green points to unlock this badge",
        }
        for badge in BADGE_THRESHOLDS
    ]
    return {"badges": badges}
