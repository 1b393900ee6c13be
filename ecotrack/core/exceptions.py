# ecotrack/core/exceptions.py
"""
Exception hierarchy for the tracker.

Workflow and CRUD code raise these; the handlers in
``ecotrack.middleware.error_handler`` turn them into ``{"error": message}``
JSON bodies with the matching HTTP status.
"""

from fastapi import status


class EcoTrackError(Exception):
    """Base exception for all tracker errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class Unauthenticated(EcoTrackError):
    """Missing, malformed or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class Forbidden(EcoTrackError):
    """Authenticated, but not allowed (wrong owner or not an admin)."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Admin access required"):
        super().__init__(message)


class NotFound(EcoTrackError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(EcoTrackError):
    """Malformed body, date, number or enum value."""

    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(EcoTrackError):
    """The request clashes with the current state of a record.

    Duplicate registration, re-processing a decided activity, a passed
    registration deadline and similar.
    """

    status_code = status.HTTP_400_BAD_REQUEST
