"""
Request parsing and validation for deal creation.

Schema validation is static and never raises; the expiration window check
depends on the current date and is kept separate so it can be exercised with an
injected ``today``.
"""

import json
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from deals_service.handlers.utils.errors import ApiError, BusinessRuleViolation, ErrorKind, Failure, Ok, Result
from deals_service.handlers.utils.observability import logger, tracer
from deals_service.models.input import CreateDealRequest
from deals_service.models.output import FieldErrorsOutput

MIN_EXPIRATION_DAYS = 7


def flatten_validation_errors(exc: ValidationError) -> Dict[str, Any]:
    """
    Group pydantic errors by field path.

    Errors without a location (e.g. the body is not an object) are reported
    as form errors.
    """
    form_errors: List[str] = []
    field_errors: Dict[str, List[str]] = {}

    for error in exc.errors():
        path = '.'.join(str(part) for part in error['loc'])
        if path:
            field_errors.setdefault(path, []).append(error['msg'])
        else:
            form_errors.append(error['msg'])

    return FieldErrorsOutput(form_errors=form_errors, field_errors=field_errors).model_dump(by_alias=True)


def validate_payload(payload: Any) -> Result[CreateDealRequest]:
    """Validate an already parsed JSON value against the create-deal schema."""
    try:
        return Ok(CreateDealRequest.model_validate(payload))
    except ValidationError as exc:
        details = flatten_validation_errors(exc)
        logger.info('Create deal payload failed schema validation', extra={
            'error_count': exc.error_count(),
            'fields': sorted(details['fieldErrors']),
        })
        return Failure(ApiError(kind=ErrorKind.SCHEMA_INVALID, message='Invalid request body', details=details))


@tracer.capture_method
def parse_and_validate_body(body: Optional[str]) -> Result[CreateDealRequest]:
    """
    Parse the raw request body and validate it.

    Args:
        body: Raw API Gateway body, possibly ``None``

    Returns:
        ``Ok`` with the typed request, or a ``Failure`` for a missing body,
        invalid JSON or schema violations
    """
    if not body:
        return Failure(ApiError(kind=ErrorKind.MALFORMED_REQUEST, message='Invalid request body: body is required'))

    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return Failure(ApiError(kind=ErrorKind.MALFORMED_REQUEST, message='Invalid JSON in request body'))

    return validate_payload(payload)


def normalize_request(request: CreateDealRequest) -> CreateDealRequest:
    """Trim whitespace around the title and logo key."""
    return request.model_copy(update={
        'title': request.title.strip(),
        'logo_file_key': request.logo_file_key.strip(),
    })


def minimum_expiration(today: Optional[date] = None) -> datetime:
    """Local midnight ``MIN_EXPIRATION_DAYS`` days after ``today``."""
    today = today or date.today()
    return datetime.combine(today, time.min) + timedelta(days=MIN_EXPIRATION_DAYS)


def validate_business_rules(request: CreateDealRequest, today: Optional[date] = None) -> None:
    """
    Enforce the expiration window.

    The expiration must fall on or after local midnight seven days from
    ``today``. Aware timestamps are compared against the minimum in local
    time; naive ones are taken as local time. The expiration itself is never
    shifted, so values at the edges of the ``datetime`` range stay comparable.

    Raises:
        BusinessRuleViolation: If the expiration is too close
    """
    expires_at = request.expires_at
    minimum = minimum_expiration(today)
    if expires_at.tzinfo is not None:
        minimum = minimum.astimezone()

    if expires_at < minimum:
        raise BusinessRuleViolation(f'expiration must be at least {MIN_EXPIRATION_DAYS} days from today')
