# ecotrack/constants/rewards.py
"""
Static reward tables: points per activity type and badge thresholds.
"""

DEFAULT_ACTIVITY_POINTS = 10

ACTIVITY_TYPES = {
    "tree-planting": {"name": "Tree Planting", "points": 50},
    "recycling": {"name": "Recycling", "points": 30},
    "cleanup": {"name": "Campus Cleanup", "points": 25},
    "energy-saving": {"name": "Energy Conservation", "points": 35},
    "water-conservation": {"name": "Water Conservation", "points": 40},
}

# Ordered by threshold, lowest first.
BADGE_THRESHOLDS = [
    {"name": "Eco Starter", "icon": "🌱", "points": 50},
    {"name": "Green Advocate", "icon": "🌿", "points": 100},
    {"name": "Eco Warrior", "icon": "🌳", "points": 200},
    {"name": "Sustainability Champion", "icon": "🏆", "points": 500},
]

LEADERBOARD_SIZE = 10


def points_for_activity(activity_type: str | None) -> int:
    entry = ACTIVITY_TYPES.get(activity_type or "")
    return entry["points"] if entry else DEFAULT_ACTIVITY_POINTS


def badges_for_points(points: int) -> list[str]:
    """Names of every badge whose threshold is at or below ``points``."""
    return [badge["name"] for badge in BADGE_THRESHOLDS if points >= badge["points"]]
