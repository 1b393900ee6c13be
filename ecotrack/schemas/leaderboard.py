# ecotrack/schemas/leaderboard.py
from typing import List

from .base import CamelModel


class Leader(CamelModel):
    id: str
    name: str
    green_points: int
    badges: List[str] = []


class LeaderboardResponse(CamelModel):
    leaders: List[Leader]
