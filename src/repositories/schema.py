"""
Table definitions shared by the repositories and create_schema.py.

Mirrors the production migrations: UUID-string keys, cascade deletes from
customers, and check constraints that back up the service-layer validation.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    Time,
    text,
    true,
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone", String(50)),
    Column("address", Text, nullable=False),
    Column("city", String(100)),
    Column("state", String(50)),
    Column("zip_code", String(20)),
    Column("latitude", Float),
    Column("longitude", Float),
    Column("gate_code", String(50)),
    Column("service_notes", Text),
    Column("billing_model", String(50)),
    Column("monthly_rate", Numeric(10, 2, asdecimal=False)),
    Column("autopay_enabled", Boolean, nullable=False, server_default=text("false")),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "billing_model IS NULL OR billing_model IN "
        "('per_month', 'plus_chems', 'per_stop', 'with_chems')",
        name="ck_customers_billing_model",
    ),
)

services = Table(
    "services",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("route_id", String(36)),
    Column("technician_id", String(36)),
    Column("service_type", String(50), nullable=False),
    Column("scheduled_date", Date, nullable=False),
    Column("scheduled_time", Time),
    Column("status", String(50), nullable=False, server_default="scheduled"),
    Column("completed_at", DateTime(timezone=True)),
    Column("service_notes", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "service_type IN ('regular', 'repair', 'one_off')",
        name="ck_services_service_type",
    ),
    CheckConstraint(
        "status IN ('scheduled', 'in_progress', 'completed', 'skipped')",
        name="ck_services_status",
    ),
)

Index("idx_services_customer", services.c.customer_id)
Index("idx_services_scheduled_date", services.c.scheduled_date)
Index("idx_services_status", services.c.status)
Index("idx_services_route", services.c.route_id)

recurring_services = Table(
    "recurring_services",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("service_type", String(50), nullable=False),
    Column("frequency", String(50), nullable=False),
    Column("day_of_week", Integer),
    Column("day_of_month", Integer),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("technician_id", String(36)),
    Column("scheduled_time", Time),
    Column("service_notes", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "service_type IN ('regular', 'repair', 'one_off')",
        name="ck_recurring_services_service_type",
    ),
    CheckConstraint(
        "frequency IN ('weekly', 'biweekly', 'monthly')",
        name="ck_recurring_services_frequency",
    ),
    CheckConstraint(
        "day_of_week IS NULL OR (day_of_week >= 0 AND day_of_week <= 6)",
        name="ck_recurring_services_day_of_week",
    ),
    CheckConstraint(
        "day_of_month IS NULL OR (day_of_month >= 1 AND day_of_month <= 31)",
        name="ck_recurring_services_day_of_month",
    ),
    CheckConstraint(
        "end_date IS NULL OR end_date >= start_date",
        name="ck_recurring_services_date_order",
    ),
    CheckConstraint(
        "frequency NOT IN ('weekly', 'biweekly') OR day_of_week IS NOT NULL",
        name="ck_recurring_services_weekly_day",
    ),
    CheckConstraint(
        "frequency <> 'monthly' OR day_of_month IS NOT NULL",
        name="ck_recurring_services_monthly_day",
    ),
)

Index("idx_recurring_services_customer", recurring_services.c.customer_id)
Index(
    "idx_recurring_services_active",
    recurring_services.c.is_active,
    postgresql_where=recurring_services.c.is_active == true(),
    sqlite_where=recurring_services.c.is_active == true(),
)
Index("idx_recurring_services_frequency", recurring_services.c.frequency)
Index("idx_recurring_services_start_date", recurring_services.c.start_date)


def create_all(engine) -> None:
    """Create any missing tables and indexes."""
    metadata.create_all(engine)
