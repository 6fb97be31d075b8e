"""Small validation primitives shared by the business services."""

from typing import Any, Iterable, Mapping

from utils.error_handling import (
    InvalidEnumValueError,
    MissingRequiredFieldError,
    OutOfRangeError,
)


def is_present(value: Any) -> bool:
    """Absent means None or an empty string/list, as submitted by form clients."""
    return value not in (None, "", [])


def ensure_present(value: Any, field: str) -> None:
    """Raise MissingRequiredFieldError if value is absent."""
    if not is_present(value):
        raise MissingRequiredFieldError(field)


def ensure_all_present(values: Mapping[str, Any], message: str = None) -> None:
    """Check several required fields at once, naming the first one missing."""
    for field, value in values.items():
        if not is_present(value):
            raise MissingRequiredFieldError(field, message)


def ensure_one_of(value: Any, allowed: Iterable[str], field: str) -> None:
    """Raise InvalidEnumValueError unless value is one of allowed."""
    allowed = list(allowed)
    if value not in allowed:
        raise InvalidEnumValueError(field, allowed)


def ensure_in_range(value: int, low: int, high: int, field: str) -> None:
    """Inclusive bounds check."""
    if value < low or value > high:
        raise OutOfRangeError(field, low, high)
