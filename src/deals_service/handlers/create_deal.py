"""
Create Deal Handler - Lambda function behind ``POST /deals``.

Pure orchestration: parse and validate the body, load the settings, hand the
request to the logic layer and render the outcome. Every path returns an API
Gateway response; no exception escapes to the Lambda runtime.
"""

from datetime import date
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from deals_service.dal import DealsDalHandler, get_dal_handler
from deals_service.handlers.models.env_vars import get_create_deal_settings
from deals_service.handlers.utils.errors import ApiError, ErrorKind, Failure, log_error_metrics
from deals_service.handlers.utils.observability import logger, metrics, tracer
from deals_service.handlers.utils.responses import api_success, error_response
from deals_service.logic.deal_service import create_deal
from deals_service.logic.validation import parse_and_validate_body
from deals_service.models.output import CreateDealOutput


def log_event_received(event: APIGatewayProxyEvent) -> None:
    request_context = event.request_context
    logger.info('Create deal request received', extra={
        'path': event.path,
        'http_method': event.http_method,
        'request_id': request_context.request_id if request_context else None,
        'body_length': len(event.body or ''),
    })
    logger.debug('Received event', extra={'event': event.raw_event})


def prepare_success_response(deal_id: str) -> Dict[str, Any]:
    response = api_success(CreateDealOutput(deal_id=deal_id).model_dump(by_alias=True))
    logger.info('Create deal succeeded', extra={'deal_id': deal_id})
    return response


def prepare_error_response(error: ApiError) -> Dict[str, Any]:
    log_error_metrics(error)
    return error_response(error)


@tracer.capture_method
def handle_create_deal(
    event: APIGatewayProxyEvent,
    dal: Optional[DealsDalHandler] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Run the create-deal pipeline for one request.

    Args:
        event: API Gateway proxy event
        dal: Data access handler; built from the settings when omitted
        today: Date the expiration window is measured from, defaults to today

    Returns:
        API Gateway proxy response
    """
    log_event_received(event)

    body_result = parse_and_validate_body(event.body)
    if isinstance(body_result, Failure):
        return prepare_error_response(body_result.error)

    settings_result = get_create_deal_settings()
    if isinstance(settings_result, Failure):
        return prepare_error_response(settings_result.error)
    settings = settings_result.value

    if dal is None:
        dal = get_dal_handler(
            table_name=settings.TABLE_NAME,
            expose_error_details=settings.EXPOSE_UPSTREAM_ERROR_DETAILS,
            endpoint_url=settings.DYNAMODB_ENDPOINT,
        )

    result = create_deal(body_result.value, dal=dal, today=today)
    if isinstance(result, Failure):
        return prepare_error_response(result.error)

    return prepare_success_response(result.value.id)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name='RequestCount', unit=MetricUnit.Count, value=1)

    try:
        return handle_create_deal(event)
    except Exception as exc:
        metrics.add_metric(name='RequestError', unit=MetricUnit.Count, value=1)
        logger.exception('Unhandled error in create deal handler', extra={'error': str(exc)})
        return error_response(ApiError(kind=ErrorKind.INTERNAL, message='Failed to create deal'))
