# ecotrack/models/event.py
from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    Boolean,
    DateTime,
    ForeignKey,
    JSON,
    Index,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ecotrack.db.base_class import Base
from ecotrack.utils.dates import utcnow
from ecotrack.utils.ids import new_id


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: new_id("evt"))
    organizer_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=True)
    registration_deadline = Column(DateTime(timezone=True), nullable=True)
    # {"address", "placeName", "lat", "lng"}
    location = Column(JSON, nullable=False, default=dict)

    max_participants = Column(Integer, nullable=False)
    # Number of registrations currently in status 'approved'. Incremented by
    # a conditional UPDATE so the capacity check happens inside the database.
    approved_count = Column(Integer, nullable=False, default=0, server_default=text("0"))

    points_reward = Column(Integer, nullable=False, default=0, server_default=text("0"))
    carbon_saved_estimate_kg = Column(Float, nullable=False, default=0.0)
    category = Column(String(32), nullable=False, default="other", server_default="other")
    status = Column(String(20), nullable=False, default="draft", server_default="draft")
    auto_approve_registrations = Column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    requires_skills = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    requirements = Column(String, nullable=True)
    what_to_bring = Column(String, nullable=True)
    # {"email", "phone"}
    contact_info = Column(JSON, nullable=False, default=dict)

    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    organizer = relationship("User", lazy="joined")

    __table_args__ = (
        Index("ix_events_date_status", "date", "status"),
        Index("ix_events_category_status", "category", "status"),
    )
