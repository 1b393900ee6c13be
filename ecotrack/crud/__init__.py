# ecotrack/crud/__init__.py

from .crud_activity import activity
from .crud_badge import badge_definition
from .crud_event import event
from .crud_registration import registration
from .crud_user import user
