"""
Deals table stream consumer.

Receives the change records of the deals table. Records are only logged;
downstream projections can hook in here.
"""

from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import DynamoDBStreamEvent, event_source
from aws_lambda_powertools.utilities.data_classes.dynamo_db_stream_event import DynamoDBRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from deals_service.handlers.utils.observability import logger, metrics, tracer


def describe_record(record: DynamoDBRecord) -> Dict[str, Any]:
    event_name = record.event_name.name if record.event_name else None
    keys = record.dynamodb.keys if record.dynamodb else None
    return {'event_name': event_name, 'keys': keys}


@logger.inject_lambda_context
@metrics.log_metrics
@tracer.capture_lambda_handler
@event_source(data_class=DynamoDBStreamEvent)
def lambda_handler(event: DynamoDBStreamEvent, context: LambdaContext) -> None:
    count = 0
    for record in event.records:
        logger.info('Received stream record', extra=describe_record(record))
        count += 1

    metrics.add_metric(name='StreamRecordsReceived', unit=MetricUnit.Count, value=count)
