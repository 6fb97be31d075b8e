"""Customer models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.base import PatchModel


class BillingModel(str, Enum):
    """How a customer is billed for pool service."""

    PER_MONTH = "per_month"
    PLUS_CHEMS = "plus_chems"
    PER_STOP = "per_stop"
    WITH_CHEMS = "with_chems"


class Customer(BaseModel):
    """Stored customer record."""

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    gate_code: Optional[str] = None
    service_notes: Optional[str] = None
    billing_model: Optional[BillingModel] = None
    monthly_rate: Optional[float] = None
    autopay_enabled: bool = False
    created_at: datetime
    updated_at: datetime


class CustomerCreate(BaseModel):
    """Inbound payload for POST /api/customers."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    gate_code: Optional[str] = None
    service_notes: Optional[str] = None
    billing_model: Optional[str] = None
    monthly_rate: Optional[float] = Field(default=None, ge=0)
    autopay_enabled: bool = False


class CustomerUpdate(PatchModel):
    """Partial update for PUT /api/customers/{id}."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    gate_code: Optional[str] = None
    service_notes: Optional[str] = None
    billing_model: Optional[str] = None
    monthly_rate: Optional[float] = Field(default=None, ge=0)
    autopay_enabled: Optional[bool] = None


class CustomerFilters(BaseModel):
    """Query-string filters for the customer list."""

    search: Optional[str] = None
    billing_model: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
