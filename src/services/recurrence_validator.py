"""
Recurrence rule validation and normalization.

Pure functions: no I/O happens here. The customer existence check that
completes create validation belongs to RecurrenceService, which runs it only
after everything below has passed.
"""

from __future__ import annotations

from typing import Any, Dict

from models.recurring_service import (
    Frequency,
    RecurringServiceCreate,
    RecurringServiceUpdate,
)
from models.service import ServiceType
from utils.error_handling import InvalidDateOrderError, MissingRequiredFieldError
from utils.validators import ensure_all_present, ensure_in_range, ensure_one_of

SERVICE_TYPES = [t.value for t in ServiceType]
FREQUENCIES = [f.value for f in Frequency]
WEEKDAY_FREQUENCIES = (Frequency.WEEKLY.value, Frequency.BIWEEKLY.value)

DAY_OF_WEEK_RANGE = (0, 6)
DAY_OF_MONTH_RANGE = (1, 31)
NON_NULLABLE_UPDATE_FIELDS = ("service_type", "frequency", "start_date", "is_active")


def validate_create(data: RecurringServiceCreate) -> None:
    """Reject a new rule on the first failing check, in a fixed order."""
    ensure_all_present(
        {
            "customer_id": data.customer_id,
            "service_type": data.service_type,
            "frequency": data.frequency,
            "start_date": data.start_date,
        }
    )
    ensure_one_of(data.service_type, SERVICE_TYPES, "service_type")
    ensure_one_of(data.frequency, FREQUENCIES, "frequency")

    if data.frequency in WEEKDAY_FREQUENCIES and data.day_of_week is None:
        raise MissingRequiredFieldError(
            "day_of_week", "day_of_week is required for weekly and biweekly frequencies"
        )
    if data.day_of_week is not None:
        ensure_in_range(data.day_of_week, *DAY_OF_WEEK_RANGE, "day_of_week")

    if data.frequency == Frequency.MONTHLY.value and data.day_of_month is None:
        raise MissingRequiredFieldError(
            "day_of_month", "day_of_month is required for monthly frequency"
        )
    if data.day_of_month is not None:
        ensure_in_range(data.day_of_month, *DAY_OF_MONTH_RANGE, "day_of_month")

    if data.end_date is not None and data.end_date < data.start_date:
        raise InvalidDateOrderError()


def validate_update(patch: RecurringServiceUpdate) -> None:
    """
    Re-check only the fields present in the patch.

    Nothing is read from the stored rule: a frequency change does not demand
    the matching day field, and end_date is compared with start_date only
    when both arrive in the same payload. Anything the partial checks miss
    is left to the table's check constraints.
    """
    for field in NON_NULLABLE_UPDATE_FIELDS:
        if patch.has(field) and getattr(patch, field) is None:
            raise MissingRequiredFieldError(field, f"{field} cannot be cleared")
    if patch.service_type is not None:
        ensure_one_of(patch.service_type, SERVICE_TYPES, "service_type")
    if patch.frequency is not None:
        ensure_one_of(patch.frequency, FREQUENCIES, "frequency")
    if patch.day_of_week is not None:
        ensure_in_range(patch.day_of_week, *DAY_OF_WEEK_RANGE, "day_of_week")
    if patch.day_of_month is not None:
        ensure_in_range(patch.day_of_month, *DAY_OF_MONTH_RANGE, "day_of_month")
    if (
        patch.start_date is not None
        and patch.end_date is not None
        and patch.end_date < patch.start_date
    ):
        raise InvalidDateOrderError()


def normalize_create(data: RecurringServiceCreate) -> Dict[str, Any]:
    """Column values for a validated rule, with the day field the frequency ignores nulled."""
    values = data.model_dump()
    if data.frequency in WEEKDAY_FREQUENCIES:
        values["day_of_month"] = None
    elif data.frequency == Frequency.MONTHLY.value:
        values["day_of_week"] = None
    return values


def update_values(patch: RecurringServiceUpdate) -> Dict[str, Any]:
    """Column values for a validated patch; empty means nothing to write."""
    return patch.write_values()
