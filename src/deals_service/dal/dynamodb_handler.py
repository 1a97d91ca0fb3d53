"""
DynamoDB implementation of the deals Data Access Layer.

Deals are written with a conditional put requiring both key attributes to be
absent, so at most one write per deal key can succeed. Store errors are
translated into ``Failure`` results; nothing is retried here.
"""

import time
from typing import Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import ClientError

from deals_service.dal import BaseDalHandler
from deals_service.handlers.utils.errors import ApiError, ErrorKind, Failure, Ok, Result
from deals_service.handlers.utils.observability import logger, metrics, tracer
from deals_service.models.deal import DealEntity

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'
GENERIC_UPSTREAM_MESSAGE = 'A database error occurred. Please try again later.'


class DynamoDBDealsHandler(BaseDalHandler):
    """DynamoDB handler for deal items."""

    def __init__(
        self,
        table_name: str,
        expose_error_details: bool = True,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            expose_error_details: Pass raw store error messages to API consumers
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        super().__init__(table_name)
        self.expose_error_details = expose_error_details

        resource_kwargs = {}
        if endpoint_url:
            resource_kwargs['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_kwargs)
        self.table = self.dynamodb.Table(table_name)

        logger.debug('DynamoDB handler initialized', extra={
            'table_name': table_name,
            'endpoint_url': endpoint_url,
        })

    @tracer.capture_method
    def save_deal(self, deal: DealEntity) -> Result[DealEntity]:
        """
        Store a new deal item.

        Args:
            deal: Entity to store

        Returns:
            ``Ok`` with the entity, a ``CONFLICT`` failure when the key already
            exists, or an ``UPSTREAM_FAILURE`` for any other store error
        """
        started = time.time()
        try:
            self.table.put_item(
                Item=deal.to_dynamodb_item(),
                ConditionExpression='attribute_not_exists(#PK) AND attribute_not_exists(#SK)',
                ExpressionAttributeNames={'#PK': 'PK', '#SK': 'SK'},
            )
        except ClientError as exc:
            error_code = exc.response.get('Error', {}).get('Code', '')
            error_message = exc.response.get('Error', {}).get('Message', str(exc))

            if error_code == CONDITIONAL_CHECK_FAILED:
                metrics.add_metric(name='DealConflict', unit=MetricUnit.Count, value=1)
                logger.warning('Deal already exists', extra={
                    'table_name': self.table_name,
                    'deal_id': deal.id,
                })
                return Failure(ApiError(kind=ErrorKind.CONFLICT, message='Deal already exists'))

            return self._upstream_failure(deal, error_message, error_code)
        except Exception as exc:  # connection errors, throttling retries exhausted, serialization
            return self._upstream_failure(deal, str(exc), type(exc).__name__)

        duration_ms = (time.time() - started) * 1000
        metrics.add_metric(name='DynamoDBPutItemDuration', unit=MetricUnit.Milliseconds, value=duration_ms)
        tracer.put_annotation('table_name', self.table_name)
        logger.info('Deal stored', extra={'table_name': self.table_name, 'deal_id': deal.id})

        return Ok(deal)

    def _upstream_failure(self, deal: DealEntity, error_message: str, error_code: str) -> Failure:
        metrics.add_metric(name='DynamoDBPutItemError', unit=MetricUnit.Count, value=1)
        logger.error('DynamoDB PutItem error', extra={
            'table_name': self.table_name,
            'deal_id': deal.id,
            'error_code': error_code,
            'error_message': error_message,
        })

        message = error_message if self.expose_error_details else GENERIC_UPSTREAM_MESSAGE
        return Failure(ApiError(kind=ErrorKind.UPSTREAM_FAILURE, message='Error saving deal', details={'message': message}))
