"""
Unit tests for the bindings handler.
"""

import json
from unittest.mock import patch

from aws_lambda_powertools.utilities.parameters.exceptions import GetParameterError

from deals_service.handlers.bindings import (
    build_fallback_bindings,
    handle_bindings,
    lambda_handler,
    read_public_bindings,
    resolve_public_path,
)
from deals_service.handlers.models.env_vars import BindingsEnvVars

PUBLIC_PATH = "/super-deals/staging/deals-ms/public"


def env_vars(**overrides) -> BindingsEnvVars:
    values = {
        "SERVICE_NAME": "deals-ms",
        "ENV_NAME": "staging",
        "AWS_REGION": "eu-west-1",
        "API_BASE_URL": "https://api.example.com",
        "S3_BUCKET_NAME": "deals-logos",
    }
    values.update(overrides)
    return BindingsEnvVars(**values)


class TestResolvePublicPath:
    """Test cases for resolve_public_path."""

    def test_explicit_path(self):
        assert resolve_public_path(env_vars(SSM_PUBLIC_PATH="/custom/path")) == "/custom/path"

    def test_derived_from_env_name(self):
        assert resolve_public_path(env_vars()) == PUBLIC_PATH

    def test_no_path_without_env_name(self):
        assert resolve_public_path(env_vars(ENV_NAME="")) == ""


class TestReadPublicBindings:
    """Test cases for reading bindings from SSM."""

    def test_no_path(self):
        assert read_public_bindings("") is None

    def test_reads_parameters_below_path(self, ssm_client):
        ssm_client.put_parameter(Name=f"{PUBLIC_PATH}/api/baseUrl", Value="https://api.example.com", Type="String")
        ssm_client.put_parameter(Name=f"{PUBLIC_PATH}/storage/bucket", Value="deals-logos", Type="String")

        bindings = read_public_bindings(PUBLIC_PATH, max_age=0)

        assert bindings == {
            "api/baseUrl": "https://api.example.com",
            "storage/bucket": "deals-logos",
        }

    def test_read_failure(self):
        with patch("deals_service.handlers.bindings.parameters.get_parameters",
                   side_effect=GetParameterError("AccessDenied")):
            assert read_public_bindings(PUBLIC_PATH) is None


class TestHandleBindings:
    """Test cases for the bindings response."""

    def test_fallback_shape(self):
        assert build_fallback_bindings(env_vars()) == {
            "service": "deals-ms",
            "env": "staging",
            "region": "eu-west-1",
            "api": {"baseUrl": "https://api.example.com"},
            "storage": {"bucket": "deals-logos", "region": "eu-west-1"},
        }

    def test_ssm_bindings_response(self):
        with patch("deals_service.handlers.bindings.read_public_bindings", return_value={"api/baseUrl": "x"}):
            response = handle_bindings(env_vars())

        assert response["statusCode"] == 200
        assert response["headers"] == {"content-type": "application/json", "cache-control": "max-age=300"}
        assert json.loads(response["body"]) == {"api/baseUrl": "x"}

    def test_fallback_when_read_fails(self):
        with patch("deals_service.handlers.bindings.read_public_bindings", return_value=None):
            response = handle_bindings(env_vars())

        assert json.loads(response["body"])["storage"]["bucket"] == "deals-logos"

    def test_lambda_handler_without_path(self, api_gateway_event, lambda_context):
        response = lambda_handler(api_gateway_event(path="/bindings", method="GET"), lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["service"] == "deals-ms"
        assert body["region"] == "us-east-1"
