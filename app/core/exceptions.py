"""Custom application exceptions."""

from typing import Any

MIN_RATING = 1
MAX_RATING = 5


class AppException(Exception):
    """Base application exception."""

    error = "ApplicationError"

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Referenced user, wine, review or comment does not exist."""

    error = "NotFound"

    def __init__(self, resource: str, resource_id: Any):
        """Initialize with 404 status code."""
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found: {resource_id}", status_code=404)


class InvalidInputException(AppException):
    """A field failed structural validation."""

    error = "InvalidInput"

    def __init__(self, message: str = "Invalid input", field: str | None = None, value: Any = None):
        """Initialize with 400 status code."""
        self.field = field
        self.value = value
        super().__init__(message, status_code=400)


class InvalidRatingException(InvalidInputException):
    """Rating outside the allowed range."""

    def __init__(self, rating: int):
        """Initialize with the offending rating."""
        super().__init__(
            f"Invalid rating: {rating}. Allowed range: {MIN_RATING}-{MAX_RATING}",
            field="rating",
            value=rating,
        )


class UnauthorizedException(AppException):
    """Session or identity token is absent, malformed or expired."""

    error = "Unauthorized"

    def __init__(self, message: str = "Unauthorized"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class ForbiddenException(AppException):
    """Caller is authenticated but does not own the resource."""

    error = "Forbidden"

    def __init__(self, resource: str, resource_id: Any):
        """Initialize with 403 status code."""
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"Not allowed to modify this {resource.lower()}: {resource_id}",
            status_code=403,
        )


class BusinessRuleViolationException(AppException):
    """A cross-field or temporal rule was violated."""

    error = "BusinessRuleViolation"

    def __init__(self, message: str = "Business rule violated", rule: str | None = None):
        """Initialize with 422 status code."""
        self.rule = rule
        super().__init__(message, status_code=422)
