# ecotrack/api/deps.py
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ecotrack.core.exceptions import Forbidden, Unauthenticated
from ecotrack.core.s3 import upload_image
from ecotrack.core.security import decode_access_token
from ecotrack.crud import crud_user
from ecotrack.db.session import get_db
from ecotrack.models.user import User

# auto_error is off so a missing token surfaces as our own 401 body rather
# than FastAPI's default detail.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> User:
    """Loads the caller from the store on every request."""
    if not token:
        raise Unauthenticated("Unauthorized")
    token_data = decode_access_token(token)
    if token_data is None:
        raise Unauthenticated("Invalid token")
    user = crud_user.user.get(db, id=token_data.sub)
    if not user:
        raise Unauthenticated("User not found")
    return user


def get_current_user_optional(
    token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> Optional[User]:
    if not token:
        return None
    token_data = decode_access_token(token)
    if token_data is None:
        # Public listings treat a bad token the same as no token.
        return None
    return crud_user.user.get(db, id=token_data.sub)


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise Forbidden("Admin access required")
    return current_user


def get_image_uploader():
    """Indirection so tests can swap the S3 upload for an in-memory fake."""
    return upload_image
