"""
Powertools instances shared by every deals service module.

Handlers decorate their entry points with these objects; logic and data access
modules log, trace and emit metrics through the same instances so a request
keeps one correlation id and one metrics flush.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

SERVICE_NAME = os.getenv('POWERTOOLS_SERVICE_NAME', 'deals-ms')
METRICS_NAMESPACE = os.getenv('POWERTOOLS_METRICS_NAMESPACE', 'DealsService')

# Timestamps in UTC so log lines line up with CreatedAt values
logger: Logger = Logger(service=SERVICE_NAME, utc=True)

# No-op outside Lambda or with POWERTOOLS_TRACE_DISABLED=true
tracer: Tracer = Tracer(service=SERVICE_NAME)

metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


def append_deal_keys(deal_id: str) -> None:
    """Attach the deal id to every following log line of the invocation."""
    logger.append_keys(deal_id=deal_id)
