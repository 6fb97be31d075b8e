"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError as PydanticValidationError

from models.response import ErrorResponse


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400, field: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.field = field

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str = "Invalid input", field: Optional[str] = None):
        super().__init__(message, status_code=400, field=field)


class MissingRequiredFieldError(ValidationError):
    """A field the operation cannot do without was absent."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"{field} is required", field=field)


class InvalidEnumValueError(ValidationError):
    """A value fell outside a closed set of choices."""

    def __init__(self, field: str, allowed: Iterable[str]):
        super().__init__(f"{field} must be one of: {', '.join(allowed)}", field=field)


class OutOfRangeError(ValidationError):
    """A numeric value fell outside its inclusive bounds."""

    def __init__(self, field: str, low: int, high: int):
        super().__init__(f"{field} must be between {low} and {high}", field=field)
        self.low = low
        self.high = high


class InvalidDateOrderError(ValidationError):
    """end_date precedes start_date."""

    def __init__(self):
        super().__init__("end_date must be after start_date", field="end_date")


class InvalidReferenceError(ValidationError):
    """A foreign key points at a record that does not exist."""

    def __init__(self, field: str = "customer_id"):
        super().__init__(f"Invalid {field}", field=field)


class ConstraintViolationError(ValidationError):
    """The store rejected a row through one of its check constraints."""

    def __init__(self):
        super().__init__("Invalid data: constraint violation")


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class InternalError(AppError):
    """Unanticipated store or infrastructure failure."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
    """Collapse a pydantic error into a single client error naming the first bad field."""
    errors = exc.errors()
    if not errors:
        return ValidationError()
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    if field:
        return ValidationError(f"Invalid {field}: {first.get('msg', 'invalid value')}", field=field)
    return ValidationError(first.get("msg", "Invalid input"))


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": ErrorResponse(error=str(error)).model_dump_json(),
    }
