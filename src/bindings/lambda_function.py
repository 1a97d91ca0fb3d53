"""
Bindings Lambda Function - Entry point for GET /bindings.

Delegates to the bindings handler, which serves the public runtime bindings.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from deals_service.handlers.bindings import lambda_handler as bindings_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    return bindings_handler(event, context)
