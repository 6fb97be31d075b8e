"""Recurring service rule operations."""

from __future__ import annotations

import uuid
from typing import List, Optional

from models.recurring_service import (
    RecurringService,
    RecurringServiceCreate,
    RecurringServiceFilters,
    RecurringServiceUpdate,
)
from repositories.customer_repo import CustomerRepository
from repositories.recurring_service_repo import RecurringServiceRepository
from services import recurrence_validator
from utils.error_handling import InvalidReferenceError, NotFoundError
from utils.logging_config import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Recurring service not found"


class RecurrenceService:
    """Validate, normalize and persist recurrence rules."""

    def __init__(
        self,
        repository: RecurringServiceRepository,
        customers: CustomerRepository,
    ):
        self.repository = repository
        self.customers = customers

    def list(self, filters: Optional[RecurringServiceFilters] = None) -> List[RecurringService]:
        return self.repository.find_all(filters)

    def get(self, rule_id: str) -> RecurringService:
        return self._found(self.repository.find_by_id(rule_id))

    def create(self, data: RecurringServiceCreate) -> RecurringService:
        """Structural checks first, then the customer reference, then the insert."""
        recurrence_validator.validate_create(data)
        if not self.customers.exists(data.customer_id):
            raise InvalidReferenceError("customer_id")

        rule_id = str(uuid.uuid4())
        rule = self.repository.create(rule_id, recurrence_validator.normalize_create(data))
        logger.info(
            "Recurring service created",
            extra={"id": rule.id, "customer_id": rule.customer_id, "frequency": rule.frequency.value},
        )
        return rule

    def update(self, rule_id: str, patch: RecurringServiceUpdate) -> RecurringService:
        recurrence_validator.validate_update(patch)
        rule = self._found(
            self.repository.update(rule_id, recurrence_validator.update_values(patch))
        )
        logger.info(
            "Recurring service updated",
            extra={"id": rule_id, "fields": sorted(patch.model_fields_set)},
        )
        return rule

    def delete(self, rule_id: str) -> None:
        if not self.repository.delete(rule_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Recurring service deleted", extra={"id": rule_id})

    def activate(self, rule_id: str) -> RecurringService:
        """Flip is_active on; calling it on an active rule is harmless."""
        rule = self._found(self.repository.set_active(rule_id, True))
        logger.info("Recurring service activated", extra={"id": rule_id})
        return rule

    def deactivate(self, rule_id: str) -> RecurringService:
        rule = self._found(self.repository.set_active(rule_id, False))
        logger.info("Recurring service deactivated", extra={"id": rule_id})
        return rule

    @staticmethod
    def _found(rule: Optional[RecurringService]) -> RecurringService:
        if rule is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return rule
