# ecotrack/models/badge_definition.py
from sqlalchemy import Column, String, Integer

from ecotrack.db.base_class import Base
from ecotrack.utils.ids import new_id


class BadgeDefinition(Base):
    __tablename__ = "badge_definitions"

    id = Column(String, primary_key=True, default=lambda: new_id("bdg"))
    name = Column(String, nullable=False, unique=True)
    description = Column(String, nullable=True)
    criteria = Column(String, nullable=True)
    required_points = Column(Integer, nullable=False)
