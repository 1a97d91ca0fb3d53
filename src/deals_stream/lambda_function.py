"""
Deals Stream Lambda Function.

Entry point for the deals table stream subscription.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.stream_consumer import lambda_handler as stream_consumer_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return stream_consumer_handler(event, context)
