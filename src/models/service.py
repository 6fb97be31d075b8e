"""Service (single scheduled visit) models."""

from datetime import date, datetime, time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from models.base import PatchModel, blank_as_absent


class ServiceType(str, Enum):
    """Kinds of visit, shared by services and recurring rules."""

    REGULAR = "regular"
    REPAIR = "repair"
    ONE_OFF = "one_off"


class ServiceStatus(str, Enum):
    """Lifecycle states of a visit."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"


class Service(BaseModel):
    """Stored visit record."""

    id: str
    customer_id: str
    route_id: Optional[str] = None
    technician_id: Optional[str] = None
    service_type: ServiceType
    scheduled_date: date
    scheduled_time: Optional[time] = None
    status: ServiceStatus = ServiceStatus.SCHEDULED
    completed_at: Optional[datetime] = None
    service_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ServiceCreate(BaseModel):
    """Inbound payload for POST /api/services."""

    model_config = ConfigDict(extra="ignore")

    customer_id: Optional[str] = None
    route_id: Optional[str] = None
    technician_id: Optional[str] = None
    service_type: Optional[str] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[time] = None
    status: Optional[str] = None
    service_notes: Optional[str] = None

    @field_validator("scheduled_date", mode="before")
    @classmethod
    def blank_date_is_absent(cls, value):
        return blank_as_absent(value)


class ServiceUpdate(PatchModel):
    """Partial update for PUT /api/services/{id}; status may be set directly."""

    customer_id: Optional[str] = None
    route_id: Optional[str] = None
    technician_id: Optional[str] = None
    service_type: Optional[str] = None
    scheduled_date: Optional[date] = None
    scheduled_time: Optional[time] = None
    status: Optional[str] = None
    completed_at: Optional[datetime] = None
    service_notes: Optional[str] = None


class SkipRequest(BaseModel):
    """Body of POST /api/services/{id}/skip."""

    model_config = ConfigDict(extra="ignore")

    reason: Optional[str] = None


class ServiceFilters(BaseModel):
    customer_id: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
