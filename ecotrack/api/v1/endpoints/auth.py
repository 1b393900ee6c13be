# ecotrack/api/v1/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ecotrack.api import deps
from ecotrack.core.config import settings
from ecotrack.core.exceptions import Conflict, Unauthenticated
from ecotrack.core.limiter import limiter
from ecotrack.core.security import create_access_token
from ecotrack.crud import crud_user
from ecotrack.db.session import get_db
from ecotrack.models.user import User
from ecotrack.schemas.user import AuthResponse, MeResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
def register(request: Request, user_in: UserCreate, db: Session = Depends(get_db)):
    """Creates a regular user account and returns a session token."""
    if crud_user.user.get_by_email(db, email=user_in.email):
        raise Conflict("User already exists")
    user = crud_user.user.create(db, obj_in=user_in)
    logger.info(f"New user registered: {user.id}")
    return {"token": create_access_token(user.id), "user": user}


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
def login(request: Request, credentials: UserLogin, db: Session = Depends(get_db)):
    user = crud_user.user.authenticate(
        db, email=credentials.email, password=credentials.password
    )
    if not user:
        raise Unauthenticated("Invalid credentials")
    return {"token": create_access_token(user.id), "user": user}


@router.get("/me", response_model=MeResponse)
def read_me(current_user: User = Depends(deps.get_current_user)):
    return {"user": current_user}
