"""Recurring service rule persistence."""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from models.recurring_service import RecurringService, RecurringServiceFilters
from repositories.postgres_repo import PostgresRepository, utcnow
from repositories.schema import recurring_services


class RecurringServiceRepository(PostgresRepository):
    """CRUD over the recurring_services table."""

    def find_all(self, filters: Optional[RecurringServiceFilters] = None) -> List[RecurringService]:
        filters = filters or RecurringServiceFilters()
        stmt = select(recurring_services)

        if filters.customer_id:
            stmt = stmt.where(recurring_services.c.customer_id == filters.customer_id)
        if filters.is_active is not None:
            stmt = stmt.where(recurring_services.c.is_active == filters.is_active)
        if filters.frequency:
            stmt = stmt.where(recurring_services.c.frequency == filters.frequency)

        stmt = stmt.order_by(recurring_services.c.created_at.desc())
        return [RecurringService.model_validate(row) for row in self.fetch_all(stmt)]

    def find_by_id(self, rule_id: str) -> Optional[RecurringService]:
        row = self.fetch_one(
            select(recurring_services).where(recurring_services.c.id == rule_id)
        )
        return RecurringService.model_validate(row) if row else None

    def create(self, rule_id: str, values: Dict[str, Any]) -> RecurringService:
        """Insert an already validated and normalized rule."""
        now = utcnow()
        row_values = dict(values, id=rule_id, is_active=True, created_at=now, updated_at=now)
        with self.transaction() as conn:
            conn.execute(insert(recurring_services).values(**row_values))
            row = self.fetch_one(
                select(recurring_services).where(recurring_services.c.id == rule_id), conn
            )
        return RecurringService.model_validate(row)

    def update(self, rule_id: str, values: Dict[str, Any]) -> Optional[RecurringService]:
        """
        Read the rule, then write the supplied columns.

        Not guarded against a concurrent writer between the read and the
        write; the last UPDATE wins.
        """
        existing = self.find_by_id(rule_id)
        if existing is None:
            return None
        if not values:
            return existing

        return self._update_returning(rule_id, dict(values, updated_at=utcnow()))

    def set_active(self, rule_id: str, is_active: bool) -> Optional[RecurringService]:
        return self._update_returning(
            rule_id, {"is_active": is_active, "updated_at": utcnow()}
        )

    def delete(self, rule_id: str) -> bool:
        result = self.execute(
            delete(recurring_services).where(recurring_services.c.id == rule_id)
        )
        return result.rowcount > 0

    def _update_returning(self, rule_id: str, values: Dict[str, Any]) -> Optional[RecurringService]:
        with self.transaction() as conn:
            result = conn.execute(
                update(recurring_services)
                .where(recurring_services.c.id == rule_id)
                .values(**values)
            )
            if result.rowcount == 0:
                return None
            row = self.fetch_one(
                select(recurring_services).where(recurring_services.c.id == rule_id), conn
            )
        return RecurringService.model_validate(row)
