# ecotrack/models/__init__.py
# Importing every model here registers it on Base.metadata.
from .user import User
from .activity import Activity
from .event import Event
from .registration import Registration
from .badge_definition import BadgeDefinition
