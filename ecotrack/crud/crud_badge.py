# ecotrack/crud/crud_badge.py
from typing import List

from sqlalchemy.orm import Session

from ecotrack.constants.rewards import BADGE_THRESHOLDS
from ecotrack.models.badge_definition import BadgeDefinition
from ecotrack.schemas.badge import Badge
from .base import CRUDBase


class CRUDBadgeDefinition(CRUDBase[BadgeDefinition, Badge, Badge]):
    def get_by_name(self, db: Session, *, name: str) -> BadgeDefinition | None:
        return db.query(self.model).filter(self.model.name == name).first()

    def seed_defaults(self, db: Session) -> List[BadgeDefinition]:
        """Inserts any catalog badge that is missing. Safe to run repeatedly."""
        created = []
        for entry in BADGE_THRESHOLDS:
            if self.get_by_name(db, name=entry["name"]):
                continue
            db_obj = self.model(
                name=entry["name"],
                description=f"Reached {entry['points']} green points",
                criteria=f"{entry['points']} points",
                required_points=entry["points"],
            )
            db.add(db_obj)
            created.append(db_obj)
        db.commit()
        return created


badge_definition = CRUDBadgeDefinition(BadgeDefinition)
