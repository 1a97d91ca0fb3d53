"""
API alarm notifier.

Forwards the messages of the API 4xx alarm topic to a Slack incoming webhook.
"""

from typing import Any, Dict

import httpx
from aws_lambda_env_modeler import get_environment_variables, init_environment_variables
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import SNSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from deals_service.handlers.models.env_vars import AlarmNotifierEnvVars
from deals_service.handlers.utils.observability import logger, metrics, tracer


@tracer.capture_method
def post_to_slack(message: str, env_vars: AlarmNotifierEnvVars) -> None:
    """Post ``message`` to the webhook; non-2xx responses raise ``httpx.HTTPStatusError``."""
    response = httpx.post(
        env_vars.SLACK_WEBHOOK_URL,
        json={'text': message},
        timeout=env_vars.SLACK_TIMEOUT_SECONDS,
    )
    response.raise_for_status()


def notify(event: SNSEvent, env_vars: AlarmNotifierEnvVars) -> int:
    sent = 0
    for record in event.records:
        post_to_slack(record.sns.message, env_vars)
        sent += 1

    metrics.add_metric(name='AlarmNotificationsSent', unit=MetricUnit.Count, value=sent)
    logger.info('Alarm notifications sent', extra={'count': sent})
    return sent


@init_environment_variables(model=AlarmNotifierEnvVars)
@logger.inject_lambda_context
@metrics.log_metrics
@tracer.capture_lambda_handler
@event_source(data_class=SNSEvent)
def lambda_handler(event: SNSEvent, context: LambdaContext) -> Dict[str, Any]:
    sent = notify(event, get_environment_variables(model=AlarmNotifierEnvVars))
    return {'notified': sent}
