"""
Customer operations.

Customers own services and recurring rules; deleting one cascades through
the store's foreign keys, so nothing here touches the dependent tables
except the read-only service history.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from models.customer import (
    BillingModel,
    Customer,
    CustomerCreate,
    CustomerFilters,
    CustomerUpdate,
)
from models.service import Service
from repositories.customer_repo import CustomerRepository
from repositories.service_repo import ServiceRepository
from utils.error_handling import MissingRequiredFieldError, NotFoundError
from utils.logging_config import get_logger
from utils.validators import ensure_all_present, ensure_one_of, is_present

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Customer not found"
BILLING_MODELS = [b.value for b in BillingModel]


class CustomerService:
    """Service for customer CRUD and visit history."""

    def __init__(self, repository: CustomerRepository, services: ServiceRepository):
        self.repository = repository
        self.services = services

    def list(self, filters: Optional[CustomerFilters] = None) -> List[Customer]:
        return self.repository.find_all(filters)

    def get(self, customer_id: str) -> Customer:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return customer

    def create(self, data: CustomerCreate) -> Customer:
        ensure_all_present(
            {"name": data.name, "address": data.address},
            "Name and address are required",
        )
        if is_present(data.billing_model):
            ensure_one_of(data.billing_model, BILLING_MODELS, "billing_model")
        else:
            data = data.model_copy(update={"billing_model": None})

        customer = self.repository.create(str(uuid.uuid4()), data)
        logger.info("Customer created", extra={"id": customer.id})
        return customer

    def update(self, customer_id: str, patch: CustomerUpdate) -> Customer:
        for field in ("name", "address", "autopay_enabled"):
            if patch.has(field) and not is_present(getattr(patch, field)):
                raise MissingRequiredFieldError(field, f"{field} cannot be cleared")
        if patch.billing_model is not None:
            ensure_one_of(patch.billing_model, BILLING_MODELS, "billing_model")

        customer = self.repository.update(customer_id, patch)
        if customer is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        if not patch.is_empty():
            logger.info(
                "Customer updated",
                extra={"id": customer_id, "fields": sorted(patch.model_fields_set)},
            )
        return customer

    def delete(self, customer_id: str) -> None:
        if not self.repository.delete(customer_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Customer deleted", extra={"id": customer_id})

    def history(self, customer_id: str, limit: Optional[int] = None) -> List[Service]:
        """Visits for a customer, newest scheduled date first; 404 if the customer is unknown."""
        if not self.repository.exists(customer_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return self.services.find_for_customer(customer_id, limit)
