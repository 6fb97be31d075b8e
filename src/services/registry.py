"""Wiring of repositories into business services for one engine."""

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from repositories.customer_repo import CustomerRepository
from repositories.recurring_service_repo import RecurringServiceRepository
from repositories.service_repo import ServiceRepository
from services.customer_service import CustomerService
from services.recurrence_service import RecurrenceService
from services.service_lifecycle import ServiceLifecycle


@dataclass
class ServiceRegistry:
    """Everything the HTTP handlers call into."""

    customers: CustomerService
    services: ServiceLifecycle
    recurring: RecurrenceService

    @classmethod
    def from_engine(cls, engine: Engine) -> "ServiceRegistry":
        customer_repo = CustomerRepository(engine)
        service_repo = ServiceRepository(engine)
        return cls(
            customers=CustomerService(customer_repo, service_repo),
            services=ServiceLifecycle(service_repo),
            recurring=RecurrenceService(RecurringServiceRepository(engine), customer_repo),
        )
