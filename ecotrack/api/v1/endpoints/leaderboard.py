# ecotrack/api/v1/endpoints/leaderboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ecotrack.crud import crud_user
from ecotrack.db.session import get_db
from ecotrack.schemas.leaderboard import LeaderboardResponse

router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


@router.get("", response_model=LeaderboardResponse)
def read_leaderboard(db: Session = Depends(get_db)):
    """Top ten users by green points."""
    return {"leaders": crud_user.user.get_leaderboard(db)}
