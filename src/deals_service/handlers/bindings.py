"""
Bindings Handler - Lambda function behind ``GET /bindings``.

Publishes the public runtime bindings of the service (API base URL, storage
bucket, region) so front ends can discover them. Values come from the public
SSM parameters of the service; when those cannot be read the handler answers
with bindings built from its own environment.
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_env_modeler import get_environment_variables
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities import parameters
from aws_lambda_powertools.utilities.parameters.exceptions import GetParameterError
from aws_lambda_powertools.utilities.typing import LambdaContext

from deals_service.config import build_ssm_public_path, load_config
from deals_service.handlers.models.env_vars import BindingsEnvVars
from deals_service.handlers.utils.observability import logger, metrics, tracer


def resolve_public_path(env_vars: BindingsEnvVars) -> str:
    """Return the SSM path holding the public bindings, or an empty string."""
    if env_vars.SSM_PUBLIC_PATH:
        return env_vars.SSM_PUBLIC_PATH
    if env_vars.ENV_NAME:
        config = load_config(env_name=env_vars.ENV_NAME)
        return build_ssm_public_path(config, service_name=env_vars.SERVICE_NAME)
    return ''


@tracer.capture_method
def read_public_bindings(path: str, max_age: int = 300) -> Optional[Dict[str, Any]]:
    """
    Read every parameter below ``path``.

    Keys are the parameter names relative to ``path``; nested parameters keep
    their relative ``a/b`` form.

    Returns:
        The bindings, or None when no path is configured or the read fails
    """
    if not path:
        return None

    try:
        values = parameters.get_parameters(path, max_age=max_age, recursive=True, decrypt=False)
    except GetParameterError as exc:
        logger.warning('Failed to read public bindings from SSM', extra={'path': path, 'error': str(exc)})
        return None

    return {name.lstrip('/'): value for name, value in values.items()}


def build_fallback_bindings(env_vars: BindingsEnvVars) -> Dict[str, Any]:
    return {
        'service': env_vars.SERVICE_NAME,
        'env': env_vars.ENV_NAME,
        'region': env_vars.region,
        'api': {
            'baseUrl': env_vars.API_BASE_URL,
        },
        'storage': {
            'bucket': env_vars.S3_BUCKET_NAME,
            'region': env_vars.region,
        },
    }


def handle_bindings(env_vars: BindingsEnvVars) -> Dict[str, Any]:
    path = resolve_public_path(env_vars)
    bindings = read_public_bindings(path, max_age=env_vars.BINDINGS_CACHE_SECONDS)

    if bindings is None:
        metrics.add_metric(name='BindingsFallback', unit=MetricUnit.Count, value=1)
        logger.info('Serving fallback bindings', extra={'path': path})
        bindings = build_fallback_bindings(env_vars)
    else:
        logger.info('Serving SSM bindings', extra={'path': path, 'keys': sorted(bindings)})

    return {
        'statusCode': 200,
        'headers': {
            'content-type': 'application/json',
            'cache-control': f'max-age={env_vars.BINDINGS_CACHE_SECONDS}',
        },
        'body': json.dumps(bindings),
    }


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handle_bindings(get_environment_variables(model=BindingsEnvVars))
