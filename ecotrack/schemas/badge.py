# ecotrack/schemas/badge.py
from typing import List

from .base import CamelModel


class Badge(CamelModel):
    name: str
    icon: str
    required_points: int
    description: str


class BadgeList(CamelModel):
    badges: List[Badge]
