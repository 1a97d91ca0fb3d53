"""
Pytest configuration and shared fixtures for the deals service.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from datetime import date, timedelta
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

# Powertools reads its settings when the handler modules are imported, so the
# environment has to be in place before any deals_service import.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "test-deals-table",
    "SLACK_WEBHOOK_URL": "https://hooks.slack.test/services/T000/B000/XXXX",
    "SERVICE_NAME": "deals-ms",
    "POWERTOOLS_SERVICE_NAME": "test-deals-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestDealsService",
    "POWERTOOLS_TRACE_DISABLED": "true",
    "LOG_LEVEL": "DEBUG",
})
for _key in ("SSM_PUBLIC_PATH", "ENV_NAME", "DYNAMODB_ENDPOINT"):
    os.environ.pop(_key, None)

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from deals_service.dal import get_dal_handler

TABLE_NAME = "test-deals-table"


@pytest.fixture(autouse=True)
def reset_dal_cache():
    """Drop cached DAL handlers so each test binds to its own mocked AWS."""
    get_dal_handler.cache_clear()
    yield
    get_dal_handler.cache_clear()


# AWS fixtures
@pytest.fixture
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws_mock):
    """Create a mock deals table keyed by PK/SK."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )

    table.wait_until_exists()
    yield table


@pytest.fixture
def ssm_client(aws_mock):
    from aws_lambda_powertools.utilities.parameters.base import DEFAULT_PROVIDERS

    DEFAULT_PROVIDERS.clear()
    yield boto3.client("ssm", region_name="us-east-1")
    DEFAULT_PROVIDERS.clear()


# Sample data fixtures
@pytest.fixture
def today() -> date:
    return date(2030, 1, 1)


def _expiration_in(days: int, today: Optional[date] = None) -> str:
    return f"{(today or date.today()) + timedelta(days=days)}T00:00:00"


@pytest.fixture
def deal_payload() -> Dict[str, Any]:
    """A valid create-deal body expiring ten days from now."""
    return {
        "userId": "merchant-123",
        "title": "50% Off Pizza",
        "originalPrice": 20,
        "discount": 50,
        "logoFileKey": "logos/pizza.png",
        "category": "foodDrink",
        "expiration": _expiration_in(10),
    }


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def build(body: Any = None, path: str = "/deals", method: str = "POST") -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": path,
            "httpMethod": method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "requestTime": "2024-01-01T12:00:00.000Z",
                "requestTimeEpoch": 1704110400000,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Error simulation fixtures
@pytest.fixture
def client_error() -> Callable[..., ClientError]:
    """Build botocore client errors for failure injection."""

    def create_error(error_code: str, message: str = "Test error", operation: str = "PutItem") -> ClientError:
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation,
        )

    return create_error


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        elif f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}e2e{os.sep}" in path:
            item.add_marker(pytest.mark.e2e)
