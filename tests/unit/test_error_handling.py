import json

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from utils import error_handling as errors


class _Probe(BaseModel):
    day_of_week: int


class TestMessages:
    def test_missing_field(self):
        assert str(errors.MissingRequiredFieldError("frequency")) == "frequency is required"

    def test_enum(self):
        err = errors.InvalidEnumValueError("frequency", ["weekly", "biweekly", "monthly"])
        assert str(err) == "frequency must be one of: weekly, biweekly, monthly"
        assert err.field == "frequency"

    def test_range(self):
        assert str(errors.OutOfRangeError("day_of_month", 1, 31)) == (
            "day_of_month must be between 1 and 31"
        )

    def test_status_codes(self):
        assert errors.InvalidDateOrderError().status_code == 400
        assert errors.ConstraintViolationError().status_code == 400
        assert errors.NotFoundError().status_code == 404
        assert errors.InternalError().status_code == 500

    def test_kind(self):
        assert errors.InvalidReferenceError().kind == "InvalidReferenceError"


class TestResponses:
    def test_to_response(self):
        resp = errors.to_response(errors.NotFoundError("Customer not found"))
        assert resp["statusCode"] == 404
        assert resp["headers"]["Content-Type"] == "application/json"
        assert json.loads(resp["body"]) == {"error": "Customer not found"}

    def test_from_pydantic_names_field(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            _Probe.model_validate({"day_of_week": "tuesday"})
        err = errors.from_pydantic(exc_info.value)
        assert err.status_code == 400
        assert err.field == "day_of_week"
        assert str(err).startswith("Invalid day_of_week")
