"""
Error taxonomy and result types for the deals service.

Expected failures travel through the request pipeline as ``Result`` values
(``Ok`` or ``Failure``) instead of exceptions, so every step's outcome is
explicit at the call site. ``DealServiceError`` subclasses are raised only by
steps that reject a request after schema validation, and are converted into a
``Failure`` by the logic layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from aws_lambda_powertools.metrics import MetricUnit

from deals_service.handlers.utils.observability import logger, metrics, tracer

T = TypeVar('T')


class ErrorKind(str, Enum):
    """Terminal failure kinds of the create-deal pipeline."""

    MALFORMED_REQUEST = 'MALFORMED_REQUEST'
    SCHEMA_INVALID = 'SCHEMA_INVALID'
    BUSINESS_RULE_VIOLATION = 'BUSINESS_RULE_VIOLATION'
    CONFIGURATION_MISSING = 'CONFIGURATION_MISSING'
    CONFLICT = 'CONFLICT'
    UPSTREAM_FAILURE = 'UPSTREAM_FAILURE'
    INTERNAL = 'INTERNAL'

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_REQUEST: 400,
    ErrorKind.SCHEMA_INVALID: 400,
    ErrorKind.BUSINESS_RULE_VIOLATION: 400,
    ErrorKind.CONFIGURATION_MISSING: 500,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UPSTREAM_FAILURE: 502,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class ApiError:
    """A failure ready to be rendered as an API response."""

    kind: ErrorKind
    message: str
    details: Optional[Any] = None

    @property
    def status_code(self) -> int:
        return self.kind.status_code


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful step outcome."""

    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """Failed step outcome."""

    error: ApiError
    ok: bool = field(default=False, init=False)


Result = Union[Ok[T], Failure]


class DealServiceError(Exception):
    """Base exception for failures that carry their own error kind."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_api_error(self) -> ApiError:
        details = self.details if self.details is not None else serialize_error(self)
        return ApiError(kind=self.kind, message=self.message, details=details)


class BusinessRuleViolation(DealServiceError):
    """Raised when a schema-valid payload breaks a business rule."""

    kind = ErrorKind.BUSINESS_RULE_VIOLATION


def serialize_error(error: BaseException) -> Dict[str, Any]:
    """
    Convert an exception into a shallow, JSON-serializable mapping.

    Only the name, message and code (when present) are kept; stack traces
    are never exposed to API consumers.
    """
    serialized: Dict[str, Any] = {'name': type(error).__name__}

    message = getattr(error, 'message', None) or str(error)
    if message:
        serialized['message'] = message

    code = getattr(error, 'code', None)
    if code is not None:
        serialized['code'] = code

    return serialized


def failure_from_exception(error: BaseException, default_message: str) -> Failure:
    """Map an exception raised inside the pipeline to a ``Failure``."""
    if isinstance(error, DealServiceError):
        return Failure(error.to_api_error())

    message = str(error) or default_message
    return Failure(ApiError(kind=ErrorKind.INTERNAL, message=message, details=serialize_error(error)))


@tracer.capture_method
def log_error_metrics(error: ApiError) -> None:
    """Log a failure and record its metrics."""
    metrics.add_metric(name='ErrorCount', unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f'Error{error.kind.value}Count', unit=MetricUnit.Count, value=1)

    tracer.put_annotation('error_kind', error.kind.value)

    log = logger.error if error.status_code >= 500 else logger.warning
    log(
        'Create deal request failed',
        extra={
            'error_kind': error.kind.value,
            'status_code': error.status_code,
            'error_message': error.message,
            'details': error.details,
        },
    )
