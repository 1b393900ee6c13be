# ecotrack/core/limiter.py
"""
Rate limiter configuration module.
Separated to avoid circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ecotrack.core.config import settings

# Keyed by client IP; switched off entirely when RATE_LIMIT_ENABLED is false.
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
