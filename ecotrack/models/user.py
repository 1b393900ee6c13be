# ecotrack/models/user.py
from sqlalchemy import Column, String, Integer, DateTime, JSON, text
from sqlalchemy.sql import func

from ecotrack.db.base_class import Base
from ecotrack.utils.dates import utcnow
from ecotrack.utils.ids import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: new_id("usr"))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String(20), nullable=False, default="user", server_default="user")

    # Only ever written through ecotrack.services.ledger
    green_points = Column(Integer, nullable=False, default=0, server_default=text("0"))
    badges = Column(JSON, nullable=False, default=list)

    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
