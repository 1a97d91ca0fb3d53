"""
AWS Lambda Handlers Module.

Each handler module is the entry point of one deployed function and follows
the three-layer layout:

1. Handler Layer (this package): event parsing, configuration, response mapping
2. Logic Layer: business rules and orchestration
3. Data Access Layer: DynamoDB persistence

Handler modules:
- create_deal: ``POST /deals``
- bindings: ``GET /bindings``
- stream_consumer: deals table stream records
- queue_consumer: SQS messages, partial batch responses
- sns_log_subscription: SNS messages written to the log
- api_alarm_notifier: API 4xx alarm messages forwarded to Slack
"""

from deals_service.handlers.utils.observability import logger, metrics, tracer

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
