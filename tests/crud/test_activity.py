from ecotrack.crud.crud_activity import activity as activity_crud
from ecotrack.models import Activity
from ecotrack.schemas.activity import ActivityLocation

from tests.utils import factories


def test_create_for_user_records_pending_submission(db):
    user = factories.create_user(db, email="planter@test.com")

    created = activity_crud.create_for_user(
        db,
        user_id=user.id,
        activity_type="tree-planting",
        description="Planted an oak",
        location=ActivityLocation(placeName="North Lawn", lat=1.5),
        images=["https://img.test/oak.jpg"],
    )

    assert created.id.startswith("act_")
    assert created.status == "pending"
    assert created.points == 50
    assert created.location == {"placeName": "North Lawn", "lat": 1.5}
    assert created.images == ["https://img.test/oak.jpg"]


def test_transition_from_pending_applies_once(db):
    user = factories.create_user(db, email="once@test.com")
    pending = factories.create_activity(db, user=user)

    assert activity_crud.mark_approved(db, activity_id=pending.id) is True
    assert activity_crud.mark_rejected(db, activity_id=pending.id, comment="late") is False
    db.commit()

    stored = db.query(Activity).filter(Activity.id == pending.id).one()
    assert stored.status == "approved"
    assert stored.admin_comment is None
