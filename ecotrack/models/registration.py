# ecotrack/models/registration.py
from sqlalchemy import (
    Column,
    String,
    Integer,
    DateTime,
    ForeignKey,
    JSON,
    Index,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ecotrack.db.base_class import Base
from ecotrack.utils.dates import utcnow
from ecotrack.utils.ids import new_id


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(String, primary_key=True, default=lambda: new_id("reg"))

    # No FK: deleting an event leaves its registrations in place.
    event_id = Column(String, nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(String(20), nullable=False, default="pending", server_default="pending")

    registered_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    approved_at = Column(DateTime(timezone=True), nullable=True)
    checked_in_at = Column(DateTime(timezone=True), nullable=True)

    notes = Column(String, nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    # {"name", "phone", "relationship"}
    emergency_contact = Column(JSON, nullable=True)
    dietary_restrictions = Column(String, nullable=True)
    tshirt_size = Column(String(4), nullable=True)
    volunteer_role = Column(String, nullable=True)

    points_awarded = Column(Integer, nullable=False, default=0, server_default=text("0"))
    points_awarded_at = Column(DateTime(timezone=True), nullable=True)
    admin_comment = Column(String, nullable=True)

    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    user = relationship("User", lazy="joined")
    event = relationship(
        "Event",
        primaryjoin="foreign(Registration.event_id) == Event.id",
        lazy="joined",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_registration_event_user"),
        Index("ix_registrations_event_status", "event_id", "status"),
        Index("ix_registrations_user_status", "user_id", "status"),
    )
