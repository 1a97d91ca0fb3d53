"""
API Alarm Notifier Lambda Function.

Entry point for the API 4xx alarm topic; forwards alarms to Slack.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.api_alarm_notifier import lambda_handler as api_alarm_notifier_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return api_alarm_notifier_handler(event, context)
