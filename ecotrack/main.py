# ecotrack/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecotrack.api.v1.api import api_router
from ecotrack.core.config import settings
from ecotrack.core.limiter import limiter
from ecotrack.middleware import error_handler_middleware, register_exception_handlers

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"EcoTrack API starting up (env={settings.ENV})")
    yield
    logger.info("EcoTrack API shutting down")


app = FastAPI(
    title="EcoTrack Campus Sustainability API",
    version="1.0.0",
    description="""
        🌱 **EcoTrack**

        Students log sustainability activities, admins review them, and
        approved work earns green points and badges.

        ## Features

        * **Activities**: Submit with photos, admin approve/reject
        * **Events**: Volunteer events with capacity and auto-approval
        * **Registrations**: Waitlisting, check-in, bulk admin actions
        * **Leaderboard & Badges**: Points ranking and milestone badges
        * **Carbon Estimates**: kg CO2 saved per activity

        ## Authentication

        Most endpoints require JWT authentication via the `Authorization: Bearer <token>` header.
        """,
    lifespan=lifespan,
)

app.state.limiter = limiter
register_exception_handlers(app)
app.middleware("http")(error_handler_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "EcoTrack API is running"}
