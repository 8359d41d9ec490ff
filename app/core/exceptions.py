"""
Custom Exception Classes
Centralized exception handling for the application.
"""

from typing import Any, Dict, List, Optional


class LetsScheduleException(Exception):
    """Base exception for the Lets-Schedule application."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(LetsScheduleException):
    """Raised when a resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        if resource_id is None:
            message = f"{resource} not found"
            details = {"resource": resource}
        else:
            message = f"{resource} with ID '{resource_id}' not found"
            details = {"resource": resource, "id": str(resource_id)}
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            details=details,
        )


class MeetingNotFoundError(NotFoundError):
    """Raised when a meeting is absent."""

    def __init__(self, meeting_id: Any = None):
        super().__init__("Meeting", meeting_id)


class RecordNotFoundError(NotFoundError):
    """Raised when a query against the store fails."""

    def __init__(self, resource: str = "Record"):
        super().__init__(resource)


class MeetingHourNegativeError(LetsScheduleException):
    """Raised when a meeting's duration in hours is negative."""

    def __init__(self, hour: int):
        super().__init__(
            message=f"Meeting hour must not be negative, got {hour}",
            code="INVALID_HOUR",
            status_code=422,
            details={"hour": hour},
        )


class MeetingValidationError(LetsScheduleException):
    """Raised when a meeting fails one or more validation checks."""

    def __init__(self, problems: List[str]):
        super().__init__(
            message="Meeting is invalid: " + ", ".join(problems),
            code="MEETING_VALIDATION_ERROR",
            status_code=422,
            details={"problems": list(problems)},
        )
