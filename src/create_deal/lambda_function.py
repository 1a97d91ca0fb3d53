"""
Create Deal Lambda Function - Entry point for POST /deals.

Delegates to the create deal handler, which validates the request, applies the
expiration rule and stores the deal with a conditional write.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.create_deal import lambda_handler as create_deal_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return create_deal_handler(event, context)
