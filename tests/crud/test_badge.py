from ecotrack.constants.rewards import BADGE_THRESHOLDS
from ecotrack.crud.crud_badge import CRUDBadgeDefinition
from ecotrack.models import BadgeDefinition

badge_crud = CRUDBadgeDefinition(BadgeDefinition)


def test_seed_defaults_creates_catalog(db):
    created = badge_crud.seed_defaults(db)

    assert [b.name for b in created] == [entry["name"] for entry in BADGE_THRESHOLDS]
    champion = badge_crud.get_by_name(db, name="Sustainability Champion")
    assert champion.required_points == 500
    assert champion.id.startswith("bdg_")


def test_seed_defaults_is_idempotent(db):
    badge_crud.seed_defaults(db)

    assert badge_crud.seed_defaults(db) == []
    assert db.query(BadgeDefinition).count() == 4


def test_seed_defaults_fills_only_missing_rows(db):
    db.add(
        BadgeDefinition(
            name="Eco Starter", description="Custom", criteria="50 points", required_points=50
        )
    )
    db.commit()

    created = badge_crud.seed_defaults(db)

    assert "Eco Starter" not in [b.name for b in created]
    assert len(created) == 3
    assert badge_crud.get_by_name(db, name="Eco Starter").description == "Custom"
