# tests/api/v1/test_bulk_registrations.py
from starlette.testclient import TestClient

from ecotrack.models import Event, Registration, User

from tests.utils import factories


def _bulk(client, event_id, headers, **body):
    return client.post(f"/api/v1/events/{event_id}/register/bulk", headers=headers, json=body)


def test_bulk_award_points_counts_duplicates_once(client: TestClient, db, admin, admin_headers, student):
    event = factories.create_event(db, organizer=admin)
    registration = factories.create_registration(db, event=event, user=student)

    response = _bulk(
        client,
        event.id,
        admin_headers,
        action="award-points",
        registrationIds=[registration.id, registration.id],
        pointsToAward=30,
    )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Bulk operation completed. 2 successful, 0 failed.",
        "results": {"success": 2, "failed": 0},
    }
    assert db.query(User.green_points).filter(User.id == student.id).scalar() == 30


def test_bulk_reports_missing_and_foreign_ids_as_failed(client: TestClient, db, admin, admin_headers, student):
    event = factories.create_event(db, organizer=admin)
    other_event = factories.create_event(db, organizer=admin, title="Elsewhere")
    mine = factories.create_registration(db, event=event, user=student, status="pending")
    foreign = factories.create_registration(db, event=other_event, user=student, status="pending")

    response = _bulk(
        client,
        event.id,
        admin_headers,
        action="approve",
        registrationIds=[mine.id, foreign.id, "reg_000000000000"],
    )

    assert response.json()["results"] == {"success": 1, "failed": 2}
    statuses = dict(db.query(Registration.id, Registration.status).all())
    assert statuses[mine.id] == "approved"
    assert statuses[foreign.id] == "pending"
    assert db.query(Event.approved_count).filter(Event.id == event.id).scalar() == 1


def test_bulk_decline_and_check_in(client: TestClient, db, admin, admin_headers):
    event = factories.create_event(db, organizer=admin)
    users = [factories.create_user(db, email=f"u{i}@test.com") for i in range(3)]
    regs = [factories.create_registration(db, event=event, user=u) for u in users]

    declined = _bulk(client, event.id, admin_headers, action="decline", registrationIds=[regs[0].id])
    checked_in = _bulk(
        client, event.id, admin_headers, action="check-in", registrationIds=[regs[1].id, regs[2].id]
    )

    assert declined.json()["results"]["success"] == 1
    assert checked_in.json()["results"]["success"] == 2
    rows = {r.id: r for r in db.query(Registration).all()}
    assert rows[regs[0].id].status == "declined"
    assert rows[regs[1].id].status == "checked-in"
    assert rows[regs[1].id].checked_in_at is not None
    assert db.query(Event.approved_count).filter(Event.id == event.id).scalar() == 0


def test_bulk_validation(client: TestClient, db, admin, admin_headers, student_headers):
    event = factories.create_event(db, organizer=admin)

    no_action = _bulk(client, event.id, admin_headers, registrationIds=["reg_000000000000"])
    no_ids = _bulk(client, event.id, admin_headers, action="approve", registrationIds=[])
    unknown = _bulk(client, event.id, admin_headers, action="promote", registrationIds=["reg_000000000000"])
    no_points = _bulk(
        client, event.id, admin_headers, action="award-points", registrationIds=["reg_000000000000"]
    )
    not_admin = _bulk(client, event.id, student_headers, action="approve", registrationIds=["x"])

    assert no_action.json() == {"error": "Missing required fields"}
    assert no_ids.json() == {"error": "Missing required fields"}
    assert unknown.json() == {"error": "Invalid action"}
    assert no_points.json() == {"error": "Invalid points amount"}
    for response in (no_action, no_ids, unknown, no_points):
        assert response.status_code == 400
    assert not_admin.status_code == 403
