"""
Environment variable models for type-safe configuration.

Each Lambda handler declares the environment it needs as a Pydantic model.
Handlers without a custom failure mapping load their model through
``aws_lambda_env_modeler``; the create-deal handler validates its model per
invocation so a missing table name becomes a 500 response instead of a crash.
"""

import json
import os
from typing import Annotated, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from deals_service.handlers.utils.errors import ApiError, ErrorKind, Failure, Ok, Result


class CreateDealEnvVars(BaseModel):
    """Environment variables for the create-deal handler."""

    model_config = ConfigDict(frozen=True)

    # DynamoDB table holding deal items
    TABLE_NAME: Annotated[str, Field(
        min_length=1,
        description='DynamoDB table name for deal storage',
    )]

    # Whether store error messages are passed through to API consumers
    EXPOSE_UPSTREAM_ERROR_DETAILS: Annotated[bool, Field(
        description='Include raw DynamoDB error messages in 502 responses',
    )] = True

    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint override for local testing',
    )] = None

    @field_validator('TABLE_NAME', mode='before')
    @classmethod
    def unwrap_json_string(cls, v):
        """Accept a JSON encoded string such as ``"\\"deals\\""``."""
        if isinstance(v, str) and v.startswith('"'):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                return v
            return parsed if isinstance(parsed, str) else v
        return v


class BindingsEnvVars(BaseModel):
    """Environment variables for the bindings handler."""

    SSM_PUBLIC_PATH: str = ''
    SERVICE_NAME: str = 'deals-ms'
    ENV_NAME: str = ''
    AWS_REGION: str = ''
    REGION: str = ''
    API_BASE_URL: str = ''
    S3_BUCKET_NAME: str = ''

    BINDINGS_CACHE_SECONDS: Annotated[int, Field(
        ge=0,
        le=3600,
        description='Max age for cached SSM bindings and the response cache-control header',
    )] = 300

    @property
    def region(self) -> str:
        return self.AWS_REGION or self.REGION


class AlarmNotifierEnvVars(BaseModel):
    """Environment variables for the API alarm notifier."""

    SLACK_WEBHOOK_URL: Annotated[str, Field(
        min_length=1,
        description='Slack incoming webhook receiving alarm notifications',
    )]

    SLACK_TIMEOUT_SECONDS: Annotated[float, Field(gt=0, le=30)] = 5.0


def get_create_deal_settings(environ: Optional[Mapping[str, str]] = None) -> Result[CreateDealEnvVars]:
    """
    Load the create-deal settings from the environment.

    Args:
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        ``Ok`` with the settings, or a ``CONFIGURATION_MISSING`` failure naming the key
    """
    environ = os.environ if environ is None else environ
    try:
        return Ok(CreateDealEnvVars.model_validate(dict(environ)))
    except ValidationError as exc:
        invalid_keys = sorted({str(error['loc'][0]) for error in exc.errors() if error['loc']})
        if 'TABLE_NAME' in invalid_keys:
            return Failure(ApiError(kind=ErrorKind.CONFIGURATION_MISSING, message='TABLE_NAME env var not set'))
        key = invalid_keys[0] if invalid_keys else 'configuration'
        return Failure(ApiError(kind=ErrorKind.CONFIGURATION_MISSING, message=f'{key} env var is invalid'))
