"""
Pydantic model validation tests.

Ensures request models keep presence information and reject badly typed
data. No database required.

Run with: pytest tests/unit/test_models.py -v
"""

from datetime import date, datetime, time

import pytest
from pydantic import ValidationError


class TestPatchModels:
    """Explicit null and omission must stay distinguishable."""

    def test_omitted_fields_are_not_written(self):
        from models.service import ServiceUpdate

        patch = ServiceUpdate.model_validate({"service_notes": "Filter cleaned"})
        assert patch.has("service_notes")
        assert not patch.has("technician_id")
        assert patch.write_values() == {"service_notes": "Filter cleaned"}

    def test_explicit_null_is_written(self):
        from models.service import ServiceUpdate

        patch = ServiceUpdate.model_validate({"technician_id": None})
        assert patch.has("technician_id")
        assert patch.write_values() == {"technician_id": None}

    def test_empty_patch(self):
        from models.customer import CustomerUpdate

        patch = CustomerUpdate.model_validate({})
        assert patch.is_empty()
        assert patch.write_values() == {}

    def test_unknown_fields_are_ignored(self):
        from models.recurring_service import RecurringServiceUpdate

        patch = RecurringServiceUpdate.model_validate({"customer_id": "other", "is_active": False})
        assert patch.write_values() == {"is_active": False}

    def test_write_values_exclude(self):
        from models.customer import CustomerUpdate

        patch = CustomerUpdate.model_validate({"name": "A", "city": "Austin"})
        assert patch.write_values(exclude=("name",)) == {"city": "Austin"}


class TestCreateModels:
    """Inbound payloads parse dates and times but leave enums to the services."""

    def test_recurring_create_parses_dates_and_time(self):
        from models.recurring_service import RecurringServiceCreate

        data = RecurringServiceCreate.model_validate(
            {
                "customer_id": "c-1",
                "service_type": "regular",
                "frequency": "weekly",
                "day_of_week": 1,
                "start_date": "2026-01-20",
                "scheduled_time": "09:30",
            }
        )
        assert data.start_date == date(2026, 1, 20)
        assert data.scheduled_time == time(9, 30)

    def test_unknown_enum_value_is_not_rejected_by_model(self):
        from models.service import ServiceCreate

        data = ServiceCreate.model_validate({"service_type": "cleaning"})
        assert data.service_type == "cleaning"

    def test_bad_date_is_rejected(self):
        from models.service import ServiceCreate

        with pytest.raises(ValidationError):
            ServiceCreate.model_validate({"scheduled_date": "tomorrow"})

    def test_negative_monthly_rate_is_rejected(self):
        from models.customer import CustomerCreate

        with pytest.raises(ValidationError):
            CustomerCreate(name="A", address="B", monthly_rate=-1)

    def test_customer_defaults(self):
        from models.customer import CustomerCreate

        data = CustomerCreate(name="A", address="B")
        assert data.autopay_enabled is False
        assert data.billing_model is None


class TestRecords:
    def test_service_record_defaults_to_scheduled(self):
        from models.service import Service, ServiceStatus

        now = datetime(2026, 1, 1, 12, 0)
        service = Service(
            id="s-1",
            customer_id="c-1",
            service_type="regular",
            scheduled_date="2026-01-15",
            created_at=now,
            updated_at=now,
        )
        assert service.status == ServiceStatus.SCHEDULED
        assert service.completed_at is None

    def test_record_rejects_unknown_status(self):
        from models.service import Service

        now = datetime(2026, 1, 1, 12, 0)
        with pytest.raises(ValidationError):
            Service(
                id="s-1",
                customer_id="c-1",
                service_type="regular",
                scheduled_date="2026-01-15",
                status="cancelled",
                created_at=now,
                updated_at=now,
            )

    def test_error_response_shape(self):
        from models.response import ErrorResponse

        assert ErrorResponse(error="Customer not found").model_dump() == {
            "error": "Customer not found"
        }


class TestEnums:
    """Test enum values."""

    def test_service_type_values(self):
        from models.service import ServiceType

        assert [t.value for t in ServiceType] == ["regular", "repair", "one_off"]

    def test_status_values(self):
        from models.service import ServiceStatus

        assert [s.value for s in ServiceStatus] == [
            "scheduled",
            "in_progress",
            "completed",
            "skipped",
        ]

    def test_frequency_values(self):
        from models.recurring_service import Frequency

        assert [f.value for f in Frequency] == ["weekly", "biweekly", "monthly"]

    def test_billing_model_values(self):
        from models.customer import BillingModel

        assert BillingModel.PER_MONTH.value == "per_month"
        assert BillingModel.WITH_CHEMS.value == "with_chems"


class TestBlankDates:
    """An empty date input reads as an omitted field on create."""

    def test_recurring_create_blank_dates(self):
        from models.recurring_service import RecurringServiceCreate

        data = RecurringServiceCreate.model_validate({"start_date": "", "end_date": "  "})
        assert data.start_date is None
        assert data.end_date is None

    def test_service_create_blank_date(self):
        from models.service import ServiceCreate

        assert ServiceCreate.model_validate({"scheduled_date": ""}).scheduled_date is None

    def test_bad_date_still_rejected(self):
        from models.recurring_service import RecurringServiceCreate

        with pytest.raises(ValidationError):
            RecurringServiceCreate.model_validate({"start_date": "2026-13-45"})
