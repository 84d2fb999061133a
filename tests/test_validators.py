"""
Unit tests for opening payload validation and request mapping.
"""

import pytest
from pydantic import ValidationError

from app.core.exceptions import OpeningValidationError
from app.core.validators import MAX_SALARY, is_http_url, validate_opening_request
from app.crud.opening import MUTABLE_FIELDS, opening_values_from_request
from app.schemas.opening import OpeningRequest


def make_request(**overrides):
    payload = {
        "role": "Engineer",
        "company": "Acme",
        "location": "Remote",
        "remote": True,
    }
    payload.update(overrides)
    return OpeningRequest(**payload)


class TestValidateOpeningRequest:

    def test_valid_minimal_request(self):
        assert validate_opening_request(make_request()) is None

    def test_valid_full_request(self):
        request = make_request(link="https://acme.example.com/jobs/1", salary=0)
        assert validate_opening_request(request) is None

    @pytest.mark.parametrize("request_obj", [None, OpeningRequest(), OpeningRequest(role="  ", link="")])
    def test_empty_request(self, request_obj):
        with pytest.raises(OpeningValidationError, match="request body is empty or malformed"):
            validate_opening_request(request_obj)

    def test_required_fields_checked_in_order(self):
        with pytest.raises(OpeningValidationError) as exc_info:
            validate_opening_request(OpeningRequest(remote=True))

        assert str(exc_info.value) == "param: role (type: string) is required"
        assert exc_info.value.field == "role"

    def test_missing_remote(self):
        request = OpeningRequest(role="Engineer", company="Acme", location="Remote")

        with pytest.raises(OpeningValidationError) as exc_info:
            validate_opening_request(request)

        assert exc_info.value.field == "remote"

    def test_remote_false_is_present(self):
        assert validate_opening_request(make_request(remote=False)) is None

    def test_link_must_be_url(self):
        with pytest.raises(OpeningValidationError) as exc_info:
            validate_opening_request(make_request(link="acme careers page"))

        assert exc_info.value.field == "link"

    def test_empty_link_is_rejected(self):
        with pytest.raises(OpeningValidationError):
            validate_opening_request(make_request(link=""))

    def test_salary_upper_bound(self):
        assert validate_opening_request(make_request(salary=MAX_SALARY)) is None

        with pytest.raises(OpeningValidationError) as exc_info:
            validate_opening_request(make_request(salary=MAX_SALARY + 1))

        assert exc_info.value.field == "salary"

    @pytest.mark.parametrize("value", ["no", "1", 0, 1])
    def test_remote_is_not_coerced(self, value):
        with pytest.raises(ValidationError):
            OpeningRequest(role="Engineer", company="Acme", location="Remote", remote=value)

    def test_negative_salary(self):
        with pytest.raises(OpeningValidationError) as exc_info:
            validate_opening_request(make_request(salary=-100))

        assert exc_info.value.field == "salary"

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_opening_request(make_request(company=""))


class TestIsHttpUrl:

    @pytest.mark.parametrize("value", [
        "https://acme.example.com",
        "http://localhost:8080/jobs?id=1",
        "  https://acme.example.com/careers  ",
    ])
    def test_accepts(self, value):
        assert is_http_url(value)

    @pytest.mark.parametrize("value", [
        "",
        "acme.example.com",
        "ftp://acme.example.com/file",
        "https://",
        "mailto:jobs@acme.example.com",
    ])
    def test_rejects(self, value):
        assert not is_http_url(value)


class TestOpeningValuesFromRequest:

    def test_maps_only_mutable_fields(self):
        request = OpeningRequest(
            id=99,
            created_at="2020-01-01T00:00:00",
            role="Engineer",
            company="Acme",
            location="Remote",
            remote=False,
        )

        values = opening_values_from_request(request)

        assert set(values) == set(MUTABLE_FIELDS)
        assert "id" not in values
        assert values["remote"] is False
        assert values["link"] is None
        assert values["salary"] is None

    def test_strips_text(self):
        values = opening_values_from_request(make_request(role="  Engineer ", link=" https://acme.example.com "))

        assert values["role"] == "Engineer"
        assert values["link"] == "https://acme.example.com"
