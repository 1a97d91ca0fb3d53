"""
API Gateway response helpers.

Every response of the deals API carries the same static CORS and JSON content
type headers; only the status code and body vary.
"""

import json
from typing import Any, Dict, Optional

from deals_service.handlers.utils.errors import ApiError

CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': '*',
    'Content-Type': 'application/json',
}


def create_api_response(status_code: int, body: Any, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Create a standardized API Gateway proxy response."""
    response_headers = dict(CORS_HEADERS)
    if headers:
        response_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': body if isinstance(body, str) else json.dumps(body, default=str),
    }


def api_success(data: Any, status_code: int = 200) -> Dict[str, Any]:
    return create_api_response(status_code=status_code, body=data)


def api_error(status_code: int, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {'error': message}
    if details is not None:
        body['details'] = details
    return create_api_response(status_code=status_code, body=body)


def error_response(error: ApiError) -> Dict[str, Any]:
    """Render a pipeline failure as an API Gateway response."""
    return api_error(error.status_code, error.message, error.details)
