"""Service (visit) persistence."""

from typing import List, Optional

from sqlalchemy import case, delete, insert, literal, select, update

from models.service import Service, ServiceCreate, ServiceFilters, ServiceStatus, ServiceUpdate
from repositories.postgres_repo import PostgresRepository, utcnow
from repositories.schema import services


class ServiceRepository(PostgresRepository):
    """CRUD over the services table plus the status transitions."""

    def find_all(self, filters: Optional[ServiceFilters] = None) -> List[Service]:
        filters = filters or ServiceFilters()
        stmt = select(services)

        if filters.customer_id:
            stmt = stmt.where(services.c.customer_id == filters.customer_id)
        if filters.status:
            stmt = stmt.where(services.c.status == filters.status)
        if filters.start_date:
            stmt = stmt.where(services.c.scheduled_date >= filters.start_date)
        if filters.end_date:
            stmt = stmt.where(services.c.scheduled_date <= filters.end_date)

        stmt = stmt.order_by(services.c.scheduled_date.desc(), services.c.scheduled_time)
        if filters.limit:
            stmt = stmt.limit(filters.limit)
        if filters.offset:
            stmt = stmt.offset(filters.offset)

        return [Service.model_validate(row) for row in self.fetch_all(stmt)]

    def find_for_customer(self, customer_id: str, limit: Optional[int] = None) -> List[Service]:
        """Service history, newest scheduled date first, ties by creation time."""
        stmt = (
            select(services)
            .where(services.c.customer_id == customer_id)
            .order_by(services.c.scheduled_date.desc(), services.c.created_at.desc())
        )
        if limit:
            stmt = stmt.limit(limit)
        return [Service.model_validate(row) for row in self.fetch_all(stmt)]

    def find_by_id(self, service_id: str) -> Optional[Service]:
        row = self.fetch_one(select(services).where(services.c.id == service_id))
        return Service.model_validate(row) if row else None

    def create(self, service_id: str, data: ServiceCreate) -> Service:
        now = utcnow()
        values = data.model_dump()
        values.update(
            id=service_id,
            status=data.status or ServiceStatus.SCHEDULED.value,
            created_at=now,
            updated_at=now,
        )
        with self.transaction() as conn:
            conn.execute(insert(services).values(**values))
            row = self.fetch_one(select(services).where(services.c.id == service_id), conn)
        return Service.model_validate(row)

    def update(self, service_id: str, patch: ServiceUpdate) -> Optional[Service]:
        values = patch.write_values()
        if not values:
            return self.find_by_id(service_id)

        values["updated_at"] = utcnow()
        return self._update_returning(service_id, values)

    def apply_transition(
        self,
        service_id: str,
        status: ServiceStatus,
        stamp_completed: bool = False,
        note: Optional[str] = None,
    ) -> Optional[Service]:
        """Set status in one statement, stamping completed_at or appending a note."""
        now = utcnow()
        values = {"status": status.value, "updated_at": now}
        if stamp_completed:
            values["completed_at"] = now
        if note:
            values["service_notes"] = case(
                (services.c.service_notes.is_(None), literal(note)),
                else_=services.c.service_notes + "\n" + literal(note),
            )
        return self._update_returning(service_id, values)

    def delete(self, service_id: str) -> bool:
        result = self.execute(delete(services).where(services.c.id == service_id))
        return result.rowcount > 0

    def _update_returning(self, service_id: str, values: dict) -> Optional[Service]:
        with self.transaction() as conn:
            result = conn.execute(
                update(services).where(services.c.id == service_id).values(**values)
            )
            if result.rowcount == 0:
                return None
            row = self.fetch_one(select(services).where(services.c.id == service_id), conn)
        return Service.model_validate(row)
