"""
Unit tests for the error taxonomy and response helpers.
"""

import json

import pytest

from deals_service.handlers.utils.errors import (
    ApiError,
    BusinessRuleViolation,
    ErrorKind,
    failure_from_exception,
    serialize_error,
)
from deals_service.handlers.utils.responses import CORS_HEADERS, api_error, api_success, error_response


class TestErrorKind:
    """Test cases for the status code mapping."""

    @pytest.mark.parametrize("kind,status", [
        (ErrorKind.MALFORMED_REQUEST, 400),
        (ErrorKind.SCHEMA_INVALID, 400),
        (ErrorKind.BUSINESS_RULE_VIOLATION, 400),
        (ErrorKind.CONFIGURATION_MISSING, 500),
        (ErrorKind.CONFLICT, 409),
        (ErrorKind.UPSTREAM_FAILURE, 502),
        (ErrorKind.INTERNAL, 500),
    ])
    def test_status_codes(self, kind, status):
        assert kind.status_code == status
        assert ApiError(kind=kind, message="x").status_code == status


class TestSerializeError:
    """Test cases for error serialization."""

    def test_plain_exception(self):
        assert serialize_error(ValueError("bad")) == {"name": "ValueError", "message": "bad"}

    def test_code_attribute_is_kept(self):
        error = RuntimeError("throttled")
        error.code = "ThrottlingException"

        assert serialize_error(error) == {
            "name": "RuntimeError",
            "message": "throttled",
            "code": "ThrottlingException",
        }

    def test_no_traceback(self):
        try:
            raise KeyError("missing")
        except KeyError as exc:
            serialized = serialize_error(exc)

        assert set(serialized) <= {"name", "message", "code"}

    def test_domain_error_keeps_kind(self):
        failure = failure_from_exception(BusinessRuleViolation("too soon"), default_message="unused")

        assert failure.error.kind is ErrorKind.BUSINESS_RULE_VIOLATION
        assert failure.error.message == "too soon"


class TestResponses:
    """Test cases for API Gateway response rendering."""

    def test_success_response(self):
        response = api_success({"message": "Deal successfully created", "dealId": "abc"})

        assert response["statusCode"] == 200
        assert response["headers"] == CORS_HEADERS
        assert json.loads(response["body"]) == {"message": "Deal successfully created", "dealId": "abc"}

    def test_cors_headers(self):
        assert CORS_HEADERS == {
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "*",
            "Content-Type": "application/json",
        }

    def test_error_without_details(self):
        response = api_error(400, "Invalid JSON in request body")

        assert json.loads(response["body"]) == {"error": "Invalid JSON in request body"}

    def test_error_response_from_api_error(self):
        error = ApiError(kind=ErrorKind.UPSTREAM_FAILURE, message="Error saving deal", details={"message": "boom"})

        response = error_response(error)

        assert response["statusCode"] == 502
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        assert json.loads(response["body"]) == {"error": "Error saving deal", "details": {"message": "boom"}}

    def test_headers_are_not_shared(self):
        response = api_success({})
        response["headers"]["X-Extra"] = "1"

        assert "X-Extra" not in CORS_HEADERS
