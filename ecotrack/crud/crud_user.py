# ecotrack/crud/crud_user.py
from typing import List, Optional

from sqlalchemy.orm import Session

from ecotrack.constants.rewards import LEADERBOARD_SIZE
from ecotrack.core.security import hash_password, verify_password
from ecotrack.models.user import User
from ecotrack.schemas.user import UserCreate
from .base import CRUDBase


class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(self.model).filter(self.model.email == email).first()

    def create(self, db: Session, *, obj_in: UserCreate, role: str = "user") -> User:
        db_obj = self.model(
            name=obj_in.name,
            email=obj_in.email,
            password_hash=hash_password(obj_in.password),
            role=role,
            green_points=0,
            badges=[],
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(db, email=email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def get_leaderboard(self, db: Session, *, limit: int = LEADERBOARD_SIZE) -> List[User]:
        """
        Top users by green points. Users with no points are excluded; ties go
        to whoever joined first, then to the lower id.
        """
        return (
            db.query(self.model)
            .filter(self.model.green_points > 0)
            .order_by(
                self.model.green_points.desc(),
                self.model.created_at.asc(),
                self.model.id.asc(),
            )
            .limit(limit)
            .all()
        )


user = CRUDUser(User)
