"""
Service (visit) lifecycle.

States: scheduled -> in_progress -> completed, with skipped reachable from
anywhere. The named transitions are conveniences that set the status and
apply one side effect; none of them checks the current status, and a plain
update may still set any status directly.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import List, Optional

from models.service import (
    Service,
    ServiceCreate,
    ServiceFilters,
    ServiceStatus,
    ServiceType,
    ServiceUpdate,
)
from repositories.service_repo import ServiceRepository
from utils.error_handling import MissingRequiredFieldError, NotFoundError
from utils.logging_config import get_logger
from utils.validators import ensure_all_present, ensure_one_of

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Service not found"
SERVICE_TYPES = [t.value for t in ServiceType]
STATUSES = [s.value for s in ServiceStatus]


@dataclass(frozen=True)
class Transition:
    """Target status of a named transition and its side effect."""

    status: ServiceStatus
    stamp_completed: bool = False
    records_reason: bool = False


TRANSITIONS = {
    "start": Transition(ServiceStatus.IN_PROGRESS),
    "complete": Transition(ServiceStatus.COMPLETED, stamp_completed=True),
    "skip": Transition(ServiceStatus.SKIPPED, records_reason=True),
}


def skip_note(reason: Optional[str]) -> Optional[str]:
    """Line appended to service_notes when a visit is skipped for a reason."""
    if not reason:
        return None
    return f"Skipped: {reason}"


class ServiceLifecycle:
    """CRUD and status transitions for individual visits."""

    def __init__(self, repository: ServiceRepository):
        self.repository = repository

    def list(self, filters: Optional[ServiceFilters] = None) -> List[Service]:
        return self.repository.find_all(filters)

    def get(self, service_id: str) -> Service:
        return self._found(self.repository.find_by_id(service_id))

    def create(self, data: ServiceCreate) -> Service:
        ensure_all_present(
            {
                "customer_id": data.customer_id,
                "service_type": data.service_type,
                "scheduled_date": data.scheduled_date,
            },
            "customer_id, service_type, and scheduled_date are required",
        )
        ensure_one_of(data.service_type, SERVICE_TYPES, "service_type")
        if data.status:
            ensure_one_of(data.status, STATUSES, "status")

        service = self.repository.create(str(uuid.uuid4()), data)
        logger.info(
            "Service created",
            extra={"id": service.id, "customer_id": service.customer_id},
        )
        return service

    def update(self, service_id: str, patch: ServiceUpdate) -> Service:
        """Partial update; an empty patch returns the record untouched."""
        for field in ("customer_id", "service_type", "scheduled_date", "status"):
            if patch.has(field) and getattr(patch, field) is None:
                raise MissingRequiredFieldError(field, f"{field} cannot be cleared")
        if patch.service_type is not None:
            ensure_one_of(patch.service_type, SERVICE_TYPES, "service_type")
        if patch.status is not None:
            ensure_one_of(patch.status, STATUSES, "status")

        service = self._found(self.repository.update(service_id, patch))
        if not patch.is_empty():
            logger.info(
                "Service updated",
                extra={"id": service_id, "fields": sorted(patch.model_fields_set)},
            )
        return service

    def delete(self, service_id: str) -> None:
        if not self.repository.delete(service_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Service deleted", extra={"id": service_id})

    def start(self, service_id: str) -> Service:
        return self._transition(service_id, "start")

    def complete(self, service_id: str) -> Service:
        """Mark completed and (re-)stamp completed_at with the current time."""
        return self._transition(service_id, "complete")

    def skip(self, service_id: str, reason: Optional[str] = None) -> Service:
        """Mark skipped, appending "Skipped: <reason>" to the notes when given."""
        return self._transition(service_id, "skip", reason)

    def _transition(self, service_id: str, name: str, reason: Optional[str] = None) -> Service:
        transition = TRANSITIONS[name]
        service = self._found(
            self.repository.apply_transition(
                service_id,
                transition.status,
                stamp_completed=transition.stamp_completed,
                note=skip_note(reason) if transition.records_reason else None,
            )
        )
        logger.info(
            "Service transitioned",
            extra={"id": service_id, "transition": name, "status": service.status.value},
        )
        return service

    @staticmethod
    def _found(service: Optional[Service]) -> Service:
        if service is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return service
