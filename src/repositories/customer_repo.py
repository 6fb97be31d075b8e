"""Customer persistence."""

from typing import List, Optional

from sqlalchemy import delete, insert, or_, select, update

from models.customer import Customer, CustomerCreate, CustomerFilters, CustomerUpdate
from repositories.postgres_repo import PostgresRepository, utcnow
from repositories.schema import customers


class CustomerRepository(PostgresRepository):
    """CRUD over the customers table."""

    def find_all(self, filters: Optional[CustomerFilters] = None) -> List[Customer]:
        filters = filters or CustomerFilters()
        stmt = select(customers)

        if filters.search:
            pattern = f"%{filters.search}%"
            stmt = stmt.where(
                or_(
                    customers.c.name.ilike(pattern),
                    customers.c.address.ilike(pattern),
                    customers.c.phone.ilike(pattern),
                )
            )
        if filters.billing_model:
            stmt = stmt.where(customers.c.billing_model == filters.billing_model)

        stmt = stmt.order_by(customers.c.name)
        if filters.limit:
            stmt = stmt.limit(filters.limit)
        if filters.offset:
            stmt = stmt.offset(filters.offset)

        return [Customer.model_validate(row) for row in self.fetch_all(stmt)]

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        row = self.fetch_one(select(customers).where(customers.c.id == customer_id))
        return Customer.model_validate(row) if row else None

    def exists(self, customer_id: str) -> bool:
        row = self.fetch_one(select(customers.c.id).where(customers.c.id == customer_id))
        return row is not None

    def create(self, customer_id: str, data: CustomerCreate) -> Customer:
        now = utcnow()
        values = data.model_dump()
        values.update(id=customer_id, created_at=now, updated_at=now)
        with self.transaction() as conn:
            conn.execute(insert(customers).values(**values))
            row = self.fetch_one(select(customers).where(customers.c.id == customer_id), conn)
        return Customer.model_validate(row)

    def update(self, customer_id: str, patch: CustomerUpdate) -> Optional[Customer]:
        values = patch.write_values()
        if not values:
            return self.find_by_id(customer_id)

        values["updated_at"] = utcnow()
        with self.transaction() as conn:
            result = conn.execute(
                update(customers).where(customers.c.id == customer_id).values(**values)
            )
            if result.rowcount == 0:
                return None
            row = self.fetch_one(select(customers).where(customers.c.id == customer_id), conn)
        return Customer.model_validate(row)

    def delete(self, customer_id: str) -> bool:
        """Delete a customer; dependent services and rules go with it."""
        result = self.execute(delete(customers).where(customers.c.id == customer_id))
        return result.rowcount > 0
