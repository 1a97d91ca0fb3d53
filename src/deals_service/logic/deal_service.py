"""
Deal creation business logic.

Runs the post-validation part of the create-deal pipeline: normalization,
the expiration rule, identifier generation, entity building and the
conditional write. Every outcome is returned as a ``Result``.
"""

from datetime import date
from typing import Optional

from aws_lambda_powertools.metrics import MetricUnit

from deals_service.dal import DealsDalHandler
from deals_service.handlers.utils.errors import DealServiceError, Failure, Ok, Result, failure_from_exception
from deals_service.handlers.utils.observability import append_deal_keys, logger, metrics, tracer
from deals_service.logic.identifiers import generate_deal_id
from deals_service.logic.validation import normalize_request, validate_business_rules
from deals_service.models.deal import DealEntity
from deals_service.models.input import CreateDealRequest


@tracer.capture_method
def create_deal(
    request: CreateDealRequest,
    dal: DealsDalHandler,
    today: Optional[date] = None,
) -> Result[DealEntity]:
    """
    Create a deal from a schema-valid request.

    Args:
        request: Request that passed schema validation
        dal: Data access handler bound to the deals table
        today: Date the expiration window is measured from, defaults to today

    Returns:
        ``Ok`` with the stored entity, or a ``Failure`` describing why the deal
        was not created
    """
    try:
        normalized = normalize_request(request)
        validate_business_rules(normalized, today=today)

        deal_id = generate_deal_id()
        tracer.put_annotation('deal_id', deal_id)
        append_deal_keys(deal_id)

        entity = DealEntity.create(normalized, deal_id)
        result = dal.save_deal(entity)
    except DealServiceError as exc:
        logger.info('Deal rejected', extra={'error_kind': exc.kind.value, 'reason': exc.message})
        return Failure(exc.to_api_error())
    except Exception as exc:
        logger.exception('Unexpected error creating deal', extra={'error': str(exc)})
        return failure_from_exception(exc, default_message='Failed to create deal')

    if isinstance(result, Failure):
        metrics.add_metric(name='DealCreationFailed', unit=MetricUnit.Count, value=1)
        return result

    metrics.add_metric(name='DealCreated', unit=MetricUnit.Count, value=1)
    logger.info('Deal created', extra={
        'deal_id': entity.id,
        'merchant_id': entity.merchant_id,
        'category': entity.category.value,
    })
    return Ok(entity)
