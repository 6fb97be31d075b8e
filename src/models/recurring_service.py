"""Recurring service rule models."""

from datetime import date, datetime, time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from models.base import PatchModel, blank_as_absent
from models.service import ServiceType


class Frequency(str, Enum):
    """How often a rule repeats."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class RecurringService(BaseModel):
    """
    Stored recurrence rule.

    Only one of day_of_week (weekly/biweekly, 0-6) and day_of_month
    (monthly, 1-31) is meaningful for a given frequency.
    """

    id: str
    customer_id: str
    service_type: ServiceType
    frequency: Frequency
    day_of_week: Optional[int] = None
    day_of_month: Optional[int] = None
    start_date: date
    end_date: Optional[date] = None
    is_active: bool = True
    technician_id: Optional[str] = None
    scheduled_time: Optional[time] = None
    service_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class RecurringServiceCreate(BaseModel):
    """
    Inbound payload for POST /api/recurring-services.

    Enum-valued fields are kept as plain strings so the validator can report
    problems in its own order and wording.
    """

    model_config = ConfigDict(extra="ignore")

    customer_id: Optional[str] = None
    service_type: Optional[str] = None
    frequency: Optional[str] = None
    day_of_week: Optional[int] = None
    day_of_month: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    technician_id: Optional[str] = None
    scheduled_time: Optional[time] = None
    service_notes: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def blank_dates_are_absent(cls, value):
        return blank_as_absent(value)


class RecurringServiceUpdate(PatchModel):
    """Partial update for PUT /api/recurring-services/{id}."""

    service_type: Optional[str] = None
    frequency: Optional[str] = None
    day_of_week: Optional[int] = None
    day_of_month: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None
    technician_id: Optional[str] = None
    scheduled_time: Optional[time] = None
    service_notes: Optional[str] = None


class RecurringServiceFilters(BaseModel):
    customer_id: Optional[str] = None
    is_active: Optional[bool] = None
    frequency: Optional[str] = None
