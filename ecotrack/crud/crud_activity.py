# ecotrack/crud/crud_activity.py
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from ecotrack.constants.rewards import points_for_activity
from ecotrack.constants.statuses import ActivityStatus
from ecotrack.models.activity import Activity
from ecotrack.schemas.activity import ActivityLocation
from ecotrack.services.carbon_estimator import estimate_carbon
from ecotrack.utils.dates import utcnow
from .base import CRUDBase


class CRUDActivity(CRUDBase[Activity, Any, Any]):
    def create_for_user(
        self,
        db: Session,
        *,
        user_id: str,
        activity_type: str,
        description: Optional[str],
        location: ActivityLocation,
        images: List[str],
    ) -> Activity:
        """
        Records a submitted activity as pending. Points come from the static
        per-type table and the carbon estimate assumes a quantity of one.
        """
        db_obj = self.model(
            user_id=user_id,
            type=activity_type,
            description=description,
            location=location.model_dump(by_alias=True, exclude_none=True),
            images=images,
            points=points_for_activity(activity_type),
            carbon_saved_estimate_kg=estimate_carbon(activity_type, 1),
            status=ActivityStatus.PENDING,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_multi_by_status(
        self, db: Session, *, status: Optional[str] = None, limit: Optional[int] = None
    ) -> List[Activity]:
        """Newest first, optionally filtered by review status."""
        query = db.query(self.model)
        if status:
            query = query.filter(self.model.status == status)
        query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_multi_by_user(self, db: Session, *, user_id: str) -> List[Activity]:
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def transition_from_pending(
        self, db: Session, *, activity_id: str, values: dict
    ) -> bool:
        """
        Moves a pending activity to a decided state in one conditional UPDATE.
        Returns False if the activity was no longer pending, so a decision is
        applied at most once even under concurrent admin clicks.
        """
        matched = (
            db.query(self.model)
            .filter(
                self.model.id == activity_id,
                self.model.status == ActivityStatus.PENDING,
            )
            .update(values, synchronize_session=False)
        )
        return matched == 1

    def mark_approved(self, db: Session, *, activity_id: str) -> bool:
        return self.transition_from_pending(
            db,
            activity_id=activity_id,
            values={"status": ActivityStatus.APPROVED, "approved_at": utcnow()},
        )

    def mark_rejected(
        self, db: Session, *, activity_id: str, comment: Optional[str]
    ) -> bool:
        return self.transition_from_pending(
            db,
            activity_id=activity_id,
            values={"status": ActivityStatus.REJECTED, "admin_comment": comment},
        )


activity = CRUDActivity(Activity)
