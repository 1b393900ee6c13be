# ecotrack/crud/crud_registration.py
from typing import List, Optional

from sqlalchemy.orm import Session

from ecotrack.models.registration import Registration
from ecotrack.schemas.registration import RegistrationCreate, RegistrationUpdate
from ecotrack.utils.dates import utcnow
from .base import CRUDBase


class CRUDRegistration(CRUDBase[Registration, RegistrationCreate, RegistrationUpdate]):
    def get_by_event_and_user(
        self, db: Session, *, event_id: str, user_id: str
    ) -> Optional[Registration]:
        return (
            db.query(self.model)
            .filter(self.model.event_id == event_id, self.model.user_id == user_id)
            .first()
        )

    def get_multi_by_event(
        self, db: Session, *, event_id: str, status: Optional[str] = None
    ) -> List[Registration]:
        """Registrations for one event, newest first."""
        query = db.query(self.model).filter(self.model.event_id == event_id)
        if status:
            query = query.filter(self.model.status == status)
        return query.order_by(
            self.model.registered_at.desc(), self.model.id.desc()
        ).all()

    def get_multi_by_user(self, db: Session, *, user_id: str) -> List[Registration]:
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.registered_at.desc(), self.model.id.desc())
            .all()
        )

    def create_for_event(
        self,
        db: Session,
        *,
        obj_in: RegistrationCreate,
        event_id: str,
        user_id: str,
        status: str,
    ) -> Registration:
        """
        Adds the registration to the session and flushes it. The caller commits,
        so the insert lands in the same transaction as the seat reservation.
        """
        data = obj_in.model_dump(exclude={"emergency_contact"})
        if obj_in.emergency_contact:
            data["emergency_contact"] = obj_in.emergency_contact.model_dump(
                by_alias=True, exclude_none=True
            )
        db_obj = self.model(
            **data,
            event_id=event_id,
            user_id=user_id,
            status=status,
            approved_at=utcnow() if status == "approved" else None,
            points_awarded=0,
        )
        db.add(db_obj)
        db.flush()
        return db_obj

    def award_points_once(self, db: Session, *, registration_id: str, points: int) -> bool:
        """
        Records a points award only if the registration has none yet.
        Returns True when this call made the award.
        """
        matched = (
            db.query(self.model)
            .filter(
                self.model.id == registration_id,
                self.model.points_awarded == 0,
            )
            .update(
                {"points_awarded": points, "points_awarded_at": utcnow()},
                synchronize_session=False,
            )
        )
        return matched == 1

    def delete_by_id(self, db: Session, *, registration_id: str) -> bool:
        """Deletes without committing. Returns False if another request got there first."""
        deleted = (
            db.query(self.model)
            .filter(self.model.id == registration_id)
            .delete(synchronize_session=False)
        )
        return deleted == 1


registration = CRUDRegistration(Registration)
