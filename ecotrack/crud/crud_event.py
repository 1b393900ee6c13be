# ecotrack/crud/crud_event.py
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from ecotrack.constants.statuses import EventStatus
from ecotrack.core.exceptions import ValidationError
from ecotrack.models.event import Event
from ecotrack.schemas.event import EventBase, EventCreate, EventUpdate
from ecotrack.utils.dates import utcnow
from .base import CRUDBase

# Nested JSON columns; stored with camelCase keys like the rest of the API.
_JSON_OBJECT_FIELDS = ("location", "contact_info")
_JSON_LIST_FIELDS = ("requires_skills", "images", "tags")
_NOT_NULLABLE = {
    "title",
    "description",
    "date",
    "max_participants",
    "points_reward",
    "category",
    "status",
    "auto_approve_registrations",
    "carbon_saved_estimate_kg",
}


def _column_values(obj_in: EventBase, *, exclude_unset: bool) -> dict:
    data = obj_in.model_dump(exclude_unset=exclude_unset)
    for field in _JSON_OBJECT_FIELDS:
        if field in data:
            nested = getattr(obj_in, field)
            data[field] = (
                nested.model_dump(by_alias=True, exclude_none=True) if nested else {}
            )
    for field in _JSON_LIST_FIELDS:
        if field in data and data[field] is None:
            data[field] = []
    return data


class CRUDEvent(CRUDBase[Event, EventCreate, EventUpdate]):
    def create_with_organizer(
        self, db: Session, *, obj_in: EventCreate, organizer_id: str
    ) -> Event:
        data = {
            key: value
            for key, value in _column_values(obj_in, exclude_unset=False).items()
            if value is not None or key not in _NOT_NULLABLE
        }
        db_obj = self.model(**data, organizer_id=organizer_id, approved_count=0)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_multi_filtered(
        self,
        db: Session,
        *,
        status: Optional[str] = None,
        category: Optional[str] = None,
        upcoming: bool = False,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Event], int]:
        """
        Events sorted by date ascending with optional filters.
        Returns the requested page and the total number of matches.
        """
        query = db.query(self.model)

        if upcoming:
            # Upcoming listings only ever show published events.
            query = query.filter(self.model.date >= utcnow())
            status = EventStatus.PUBLISHED
        if status:
            query = query.filter(self.model.status == status)
        if category:
            query = query.filter(self.model.category == category)

        total = query.count()
        events = (
            query.order_by(self.model.date.asc(), self.model.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return events, total

    def update(self, db: Session, *, db_obj: Event, obj_in: EventUpdate) -> Event:
        update_data = _column_values(obj_in, exclude_unset=True)
        for field, value in update_data.items():
            if value is None and field in _NOT_NULLABLE:
                raise ValidationError(f"{field} cannot be null")
        update_data["updated_at"] = utcnow()
        return super().update(db, db_obj=db_obj, obj_in=update_data)

    # --- Capacity accounting -------------------------------------------------
    # approved_count mirrors the number of registrations in status 'approved'.
    # None of these commit; callers commit together with the registration
    # change they belong to.

    def reserve_seat(self, db: Session, *, event_id: str) -> bool:
        """
        Takes one seat if the event still has room. The capacity test runs
        inside the UPDATE itself, so two concurrent registrations can never
        both take the last seat.
        """
        matched = (
            db.query(self.model)
            .filter(
                self.model.id == event_id,
                self.model.approved_count < self.model.max_participants,
            )
            .update(
                {self.model.approved_count: self.model.approved_count + 1},
                synchronize_session=False,
            )
        )
        return matched == 1

    def take_seat(self, db: Session, *, event_id: str) -> None:
        """Unconditional increment, used when an admin approves manually."""
        db.query(self.model).filter(self.model.id == event_id).update(
            {self.model.approved_count: self.model.approved_count + 1},
            synchronize_session=False,
        )

    def release_seat(self, db: Session, *, event_id: str) -> None:
        db.query(self.model).filter(
            self.model.id == event_id, self.model.approved_count > 0
        ).update(
            {self.model.approved_count: self.model.approved_count - 1},
            synchronize_session=False,
        )


event = CRUDEvent(Event)
