from ecotrack.crud.crud_registration import CRUDRegistration
from ecotrack.models import Registration
from ecotrack.schemas.registration import RegistrationCreate

from tests.utils import factories

registration_crud = CRUDRegistration(Registration)


def test_create_for_event_stores_volunteer_details(db):
    organizer = factories.create_user(db, role="admin")
    volunteer = factories.create_user(db, email="vol@test.com")
    event = factories.create_event(db, organizer=organizer)
    obj_in = RegistrationCreate(
        notes="Happy to help",
        skills=["first aid"],
        emergencyContact={"name": "Sam", "phone": "555-0100"},
        tshirtSize="M",
    )

    registration = registration_crud.create_for_event(
        db, obj_in=obj_in, event_id=event.id, user_id=volunteer.id, status="approved"
    )
    db.commit()

    assert registration.id.startswith("reg_")
    assert registration.approved_at is not None
    assert registration.skills == ["first aid"]
    assert registration.emergency_contact == {"name": "Sam", "phone": "555-0100"}
    assert registration.tshirt_size == "M"


def test_award_points_once(db):
    organizer = factories.create_user(db, role="admin")
    volunteer = factories.create_user(db, email="vol@test.com")
    event = factories.create_event(db, organizer=organizer)
    registration = factories.create_registration(db, event=event, user=volunteer)

    assert registration_crud.award_points_once(db, registration_id=registration.id, points=25)
    assert not registration_crud.award_points_once(db, registration_id=registration.id, points=40)
    db.commit()

    stored = db.query(Registration).filter(Registration.id == registration.id).one()
    assert stored.points_awarded == 25
    assert stored.points_awarded_at is not None


def test_delete_by_id_reports_whether_a_row_was_removed(db):
    organizer = factories.create_user(db, role="admin")
    volunteer = factories.create_user(db, email="vol@test.com")
    event = factories.create_event(db, organizer=organizer)
    registration = factories.create_registration(db, event=event, user=volunteer)
    registration_id = registration.id

    assert registration_crud.delete_by_id(db, registration_id=registration_id) is True
    assert registration_crud.delete_by_id(db, registration_id=registration_id) is False
    db.commit()

    assert db.query(Registration).filter(Registration.id == registration_id).count() == 0


def test_get_multi_by_event_filters_by_status(db):
    organizer = factories.create_user(db, role="admin")
    event = factories.create_event(db, organizer=organizer)
    a = factories.create_user(db, email="a@test.com")
    b = factories.create_user(db, email="b@test.com")
    factories.create_registration(db, event=event, user=a, status="approved")
    waiting = factories.create_registration(db, event=event, user=b, status="waitlisted")

    results = registration_crud.get_multi_by_event(db, event_id=event.id, status="waitlisted")

    assert [r.id for r in results] == [waiting.id]
