"""
SNS Log Subscription Lambda Function.

Entry point for the topics whose messages are written to CloudWatch Logs.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.sns_log_subscription import lambda_handler as sns_log_subscription_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return sns_log_subscription_handler(event, context)
