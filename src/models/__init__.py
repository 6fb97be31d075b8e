"""Pydantic models for API payloads and stored records."""

from models.customer import (  # noqa: F401
    BillingModel,
    Customer,
    CustomerCreate,
    CustomerFilters,
    CustomerUpdate,
)
from models.recurring_service import (  # noqa: F401
    Frequency,
    RecurringService,
    RecurringServiceCreate,
    RecurringServiceFilters,
    RecurringServiceUpdate,
)
from models.response import ErrorResponse  # noqa: F401
from models.service import (  # noqa: F401
    Service,
    ServiceCreate,
    ServiceFilters,
    ServiceStatus,
    ServiceType,
    SkipRequest,
    ServiceUpdate,
)
