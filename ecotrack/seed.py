# ecotrack/seed.py
"""
Resets the database and loads demo data: one admin, three students with
points and badges, a handful of activities and the badge catalog.

Run with ``ecotrack-seed``.
"""
import logging

from sqlalchemy.orm import Session

from ecotrack.constants.statuses import ActivityStatus, UserRole
from ecotrack.core.security import hash_password
from ecotrack.crud import crud_badge
from ecotrack.db.base_class import Base
from ecotrack.db.session import SessionLocal, engine
from ecotrack.models import Activity, BadgeDefinition, Event, Registration, User
from ecotrack.utils.dates import utcnow

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@ecocampus.com"
ADMIN_PASSWORD = "admin123"
DEMO_PASSWORD = "password123"


def get_seed_users():
    return [
        {
            "name": "John Doe",
            "email": "john@example.com",
            "green_points": 150,
            "badges": ["Eco Starter", "Green Advocate"],
        },
        {
            "name": "Jane Smith",
            "email": "jane@example.com",
            "green_points": 75,
            "badges": ["Eco Starter"],
        },
        {
            "name": "Bob Wilson",
            "email": "bob@example.com",
            "green_points": 220,
            "badges": ["Eco Starter", "Green Advocate", "Eco Warrior"],
        },
    ]


def get_seed_activities(users):
    """Sample activities keyed to the demo users, in creation order."""
    john, jane, bob = users
    now = utcnow()
    return [
        Activity(
            user_id=john.id,
            type="tree-planting",
            description="Planted 10 trees in the campus garden",
            location={"placeName": "Campus Garden"},
            points=50,
            carbon_saved_estimate_kg=217.7,
            status=ActivityStatus.APPROVED,
            approved_at=now,
            images=[],
        ),
        Activity(
            user_id=jane.id,
            type="recycling",
            description="Recycled 5kg of plastic bottles",
            location={"placeName": "Student Center"},
            points=20,
            carbon_saved_estimate_kg=12.5,
            status=ActivityStatus.APPROVED,
            approved_at=now,
            images=[],
        ),
        Activity(
            user_id=bob.id,
            type="cleanup",
            description="Participated in campus cleanup, collected 10 bags of waste",
            location={"placeName": "Main Campus"},
            points=30,
            carbon_saved_estimate_kg=5.0,
            status=ActivityStatus.APPROVED,
            approved_at=now,
            images=[],
        ),
        Activity(
            user_id=john.id,
            type="biking",
            description="Biked to campus for the entire week (25km total)",
            location={"placeName": "Campus Entrance"},
            points=15,
            carbon_saved_estimate_kg=4.0,
            status=ActivityStatus.PENDING,
            images=[],
        ),
    ]


def clear_database(db: Session) -> None:
    # Children first; registrations have no foreign key to events.
    for model in (Registration, Activity, Event, BadgeDefinition, User):
        db.query(model).delete(synchronize_session=False)
    db.commit()


def seed_database(db: Session) -> None:
    clear_database(db)
    logger.info("Cleared existing data")

    admin = User(
        name="Admin User",
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        green_points=0,
        badges=[],
    )
    db.add(admin)

    demo_hash = hash_password(DEMO_PASSWORD)
    users = [
        User(password_hash=demo_hash, role=UserRole.USER, **data)
        for data in get_seed_users()
    ]
    db.add_all(users)
    db.flush()
    logger.info(f"Created admin ({ADMIN_EMAIL}) and {len(users)} demo users")

    activities = get_seed_activities(users)
    db.add_all(activities)
    db.commit()
    logger.info(f"Created {len(activities)} sample activities")

    crud_badge.badge_definition.seed_defaults(db)
    logger.info("Created badge definitions")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info(f"Seed completed. Log in as {ADMIN_EMAIL} / {ADMIN_PASSWORD}")


if __name__ == "__main__":
    main()
