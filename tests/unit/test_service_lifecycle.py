"""
Service lifecycle unit tests.

The repository is mocked; these check which status and side effect each
named transition asks the store for.

Run with: pytest tests/unit/test_service_lifecycle.py -v
"""

from unittest.mock import MagicMock

import pytest

from models.service import ServiceCreate, ServiceStatus, ServiceUpdate
from services.service_lifecycle import TRANSITIONS, ServiceLifecycle, skip_note
from utils.error_handling import InvalidEnumValueError, MissingRequiredFieldError, NotFoundError


@pytest.fixture
def repo():
    return MagicMock()


@pytest.fixture
def lifecycle(repo):
    return ServiceLifecycle(repo)


class TestTransitionTable:
    """The three named transitions and their effects."""

    def test_targets(self):
        assert TRANSITIONS["start"].status == ServiceStatus.IN_PROGRESS
        assert TRANSITIONS["complete"].status == ServiceStatus.COMPLETED
        assert TRANSITIONS["skip"].status == ServiceStatus.SKIPPED

    def test_only_complete_stamps(self):
        assert [n for n, t in TRANSITIONS.items() if t.stamp_completed] == ["complete"]

    def test_only_skip_records_reason(self):
        assert [n for n, t in TRANSITIONS.items() if t.records_reason] == ["skip"]


class TestSkipNote:
    def test_reason_is_prefixed(self):
        assert skip_note("Customer requested") == "Skipped: Customer requested"

    @pytest.mark.parametrize("reason", [None, ""])
    def test_no_reason_no_note(self, reason):
        assert skip_note(reason) is None


class TestTransitions:
    def test_start(self, lifecycle, repo):
        lifecycle.start("s-1")
        repo.apply_transition.assert_called_once_with(
            "s-1", ServiceStatus.IN_PROGRESS, stamp_completed=False, note=None
        )

    def test_complete(self, lifecycle, repo):
        lifecycle.complete("s-1")
        repo.apply_transition.assert_called_once_with(
            "s-1", ServiceStatus.COMPLETED, stamp_completed=True, note=None
        )

    def test_skip_with_reason(self, lifecycle, repo):
        lifecycle.skip("s-1", "Gate locked")
        repo.apply_transition.assert_called_once_with(
            "s-1", ServiceStatus.SKIPPED, stamp_completed=False, note="Skipped: Gate locked"
        )

    def test_missing_service(self, lifecycle, repo):
        repo.apply_transition.return_value = None
        with pytest.raises(NotFoundError) as exc_info:
            lifecycle.complete("missing")
        assert str(exc_info.value) == "Service not found"


class TestCreateAndUpdate:
    def test_create_rejects_before_touching_store(self, lifecycle, repo):
        with pytest.raises(MissingRequiredFieldError):
            lifecycle.create(ServiceCreate(service_type="regular"))
        repo.create.assert_not_called()

    def test_create_generates_uuid(self, lifecycle, repo):
        data = ServiceCreate(customer_id="c-1", service_type="repair", scheduled_date="2026-01-15")
        lifecycle.create(data)
        service_id, passed = repo.create.call_args.args
        assert len(service_id) == 36
        assert passed is data

    def test_update_rejects_bad_type(self, lifecycle, repo):
        with pytest.raises(InvalidEnumValueError):
            lifecycle.update("s-1", ServiceUpdate(service_type=""))
        repo.update.assert_not_called()

    def test_update_missing(self, lifecycle, repo):
        repo.update.return_value = None
        with pytest.raises(NotFoundError):
            lifecycle.update("s-1", ServiceUpdate())

    def test_delete_missing(self, lifecycle, repo):
        repo.delete.return_value = False
        with pytest.raises(NotFoundError):
            lifecycle.delete("s-1")
