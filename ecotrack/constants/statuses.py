# ecotrack/constants/statuses.py
"""
Status and enum values shared by models, schemas and workflows.
"""


class ActivityStatus:
    """Activity review status values."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def all_values(cls) -> list[str]:
        return [cls.PENDING, cls.APPROVED, cls.REJECTED]

    @classmethod
    def is_valid(cls, status: str) -> bool:
        return status in cls.all_values()


class EventStatus:
    """Event lifecycle status values."""
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @classmethod
    def all_values(cls) -> list[str]:
        return [cls.DRAFT, cls.PUBLISHED, cls.CANCELLED, cls.COMPLETED]

    @classmethod
    def updatable_values(cls) -> list[str]:
        """Statuses an admin may set through an event update."""
        return [cls.DRAFT, cls.PUBLISHED, cls.CANCELLED]


class EventCategory:
    TREE_PLANTING = "tree-planting"
    CLEANUP = "cleanup"
    WORKSHOP = "workshop"
    COLLECTION_DRIVE = "collection-drive"
    COMPETITION = "competition"
    AWARENESS = "awareness"
    OTHER = "other"

    @classmethod
    def all_values(cls) -> list[str]:
        return [
            cls.TREE_PLANTING,
            cls.CLEANUP,
            cls.WORKSHOP,
            cls.COLLECTION_DRIVE,
            cls.COMPETITION,
            cls.AWARENESS,
            cls.OTHER,
        ]


class RegistrationStatus:
    """Event registration status values."""
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    WAITLISTED = "waitlisted"
    CHECKED_IN = "checked-in"
    NO_SHOW = "no-show"

    @classmethod
    def all_values(cls) -> list[str]:
        return [
            cls.PENDING,
            cls.APPROVED,
            cls.DECLINED,
            cls.WAITLISTED,
            cls.CHECKED_IN,
            cls.NO_SHOW,
        ]

    @classmethod
    def holds_seat(cls, status: str | None) -> bool:
        """Only approved registrations count against event capacity."""
        return status == cls.APPROVED


class UserRole:
    USER = "user"
    ADMIN = "admin"
