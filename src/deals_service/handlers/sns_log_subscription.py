"""
SNS log subscription.

Writes every message published to the subscribed topics into the function's
structured log.
"""

from typing import Any, Dict

from aws_lambda_powertools.utilities.data_classes import SNSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from deals_service.handlers.utils.observability import logger, metrics, tracer


@tracer.capture_method
def log_sns_messages(event: SNSEvent) -> int:
    count = 0
    for record in event.records:
        message = record.sns
        logger.info('SNS message', extra={
            'message': message.message,
            'subject': message.subject,
            'timestamp': message.timestamp,
            'topic_arn': message.topic_arn,
            'message_id': message.message_id,
        })
        count += 1
    return count


@logger.inject_lambda_context
@metrics.log_metrics
@tracer.capture_lambda_handler
@event_source(data_class=SNSEvent)
def lambda_handler(event: SNSEvent, context: LambdaContext) -> Dict[str, Any]:
    try:
        log_sns_messages(event)
    except Exception as exc:
        logger.exception('Error processing SNS message', extra={'error': str(exc)})
        return {'statusCode': 500, 'body': 'Error processing message'}

    return {'statusCode': 200, 'body': 'Messages logged successfully'}
