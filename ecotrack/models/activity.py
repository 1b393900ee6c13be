# ecotrack/models/activity.py
from sqlalchemy import Column, String, Integer, Float, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ecotrack.db.base_class import Base
from ecotrack.utils.dates import utcnow
from ecotrack.utils.ids import new_id


class Activity(Base):
    __tablename__ = "activities"

    id = Column(String, primary_key=True, default=lambda: new_id("act"))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    # Free-form category key; unknown types are accepted.
    type = Column(String, nullable=False)
    description = Column(String, nullable=True)
    # {"placeName": str, "lat": float | None, "lng": float | None}
    location = Column(JSON, nullable=False, default=dict)
    images = Column(JSON, nullable=False, default=list)

    points = Column(Integer, nullable=False, default=0)
    carbon_saved_estimate_kg = Column(Float, nullable=False, default=0.0)

    status = Column(String(20), nullable=False, default="pending", server_default="pending", index=True)
    admin_comment = Column(String, nullable=True)

    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    approved_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", lazy="joined")
