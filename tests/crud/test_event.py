from datetime import timedelta

import pytest

from ecotrack.core.exceptions import ValidationError
from ecotrack.crud.crud_event import CRUDEvent
from ecotrack.models import Event
from ecotrack.schemas.event import EventCreate, EventUpdate
from ecotrack.utils.dates import utcnow

from tests.utils import factories

event_crud = CRUDEvent(Event)


def _approved_count(db, event_id):
    return db.query(Event.approved_count).filter(Event.id == event_id).scalar()


def test_create_with_organizer_defaults(db):
    organizer = factories.create_user(db, role="admin")
    event_in = EventCreate(
        title="Tree Day",
        description="Plant saplings",
        date=utcnow() + timedelta(days=3),
        maxParticipants=20,
        pointsReward=-5,
    )

    event = event_crud.create_with_organizer(db, obj_in=event_in, organizer_id=organizer.id)

    assert event.id.startswith("evt_")
    assert event.organizer_id == organizer.id
    assert event.status == "draft"
    assert event.category == "other"
    assert event.points_reward == 0
    assert event.auto_approve_registrations is True
    assert event.approved_count == 0


def test_reserve_seat_stops_at_capacity(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer, max_participants=2)

    assert event_crud.reserve_seat(db, event_id=event.id) is True
    assert event_crud.reserve_seat(db, event_id=event.id) is True
    assert event_crud.reserve_seat(db, event_id=event.id) is False
    db.commit()

    assert _approved_count(db, event.id) == 2


def test_reserve_seat_ignores_a_stale_snapshot(db):
    """A caller that read the event while it still had room cannot over-admit."""
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer, max_participants=1)
    snapshot_count = event.approved_count

    assert event_crud.reserve_seat(db, event_id=event.id) is True
    db.commit()

    # The second caller still believes there is a free seat.
    assert snapshot_count < event.max_participants
    assert event_crud.reserve_seat(db, event_id=event.id) is False
    db.commit()
    assert _approved_count(db, event.id) == 1


def test_release_seat_never_goes_negative(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer)

    event_crud.release_seat(db, event_id=event.id)
    db.commit()

    assert _approved_count(db, event.id) == 0


def test_take_seat_is_not_capacity_checked(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer, max_participants=1, approved_count=1)

    event_crud.take_seat(db, event_id=event.id)
    db.commit()

    assert _approved_count(db, event.id) == 2


def test_get_multi_filtered_upcoming_forces_published(db):
    organizer = factories.create_user(db, role="admin")
    soon = factories.create_event(db, organizer=organizer, date=utcnow() + timedelta(days=1))
    factories.create_event(db, organizer=organizer, date=utcnow() + timedelta(days=2), status="draft")
    factories.create_event(db, organizer=organizer, date=utcnow() - timedelta(days=2))

    events, total = event_crud.get_multi_filtered(db, status="draft", upcoming=True)

    assert total == 1
    assert [e.id for e in events] == [soon.id]


def test_update_rejects_null_for_required_fields(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer)

    with pytest.raises(ValidationError):
        event_crud.update(db, db_obj=event, obj_in=EventUpdate(title=None))


def test_update_stamps_updated_at(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer)
    before = utcnow()

    updated = event_crud.update(db, db_obj=event, obj_in=EventUpdate(status="cancelled"))

    assert updated.status == "cancelled"
    assert updated.updated_at.replace(tzinfo=None) >= before.replace(tzinfo=None)
