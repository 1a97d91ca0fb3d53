"""
Deals Queue Lambda Function.

Entry point for the deals SQS queue; returns the partial batch response.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.queue_consumer import lambda_handler as queue_consumer_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return queue_consumer_handler(event, context)
