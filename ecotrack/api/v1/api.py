# ecotrack/api/v1/api.py

from fastapi import APIRouter

from ecotrack.api.v1.endpoints import (
    activities,
    auth,
    badges,
    carbon,
    events,
    health,
    leaderboard,
    registrations,
    user_registrations,
)

# This is the main router for the v1 API.
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(activities.router)
api_router.include_router(events.router)
api_router.include_router(registrations.router)
api_router.include_router(user_registrations.router)
api_router.include_router(leaderboard.router)
api_router.include_router(badges.router)
api_router.include_router(carbon.router)
