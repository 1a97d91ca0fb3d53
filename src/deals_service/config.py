"""
Deployment configuration for the deals service.

Resolves the per-environment settings (account, region, service identity,
parameter store prefix, source repository) from the process environment, with
environment specific overrides merged over the defaults. Also builds the SSM
parameter paths the service publishes its bindings under.
"""

import os
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

LOCAL_ENV_NAME = 'local'
LOCAL_ACCOUNT_ID = '000000000000'
DEFAULT_REGION = 'us-east-1'
DEFAULT_SERVICE_NAME = 'deals-ms'
DEFAULT_PARAMETER_STORE_PREFIX = '/super-deals'
DEFAULT_GITHUB_BRANCH = 'main'


class ServiceInfo(BaseModel):
    name: str = DEFAULT_SERVICE_NAME
    display_name: str = ''


class GitHubSettings(BaseModel):
    repo: Optional[str] = None
    branch: str = DEFAULT_GITHUB_BRANCH
    codestar_connection_id: str


class DeploymentConfig(BaseModel):
    """Resolved configuration of one deployment environment."""

    env_name: str
    account: Optional[str] = None
    region: str = DEFAULT_REGION
    service: ServiceInfo = Field(default_factory=ServiceInfo)
    parameter_store_prefix: str = DEFAULT_PARAMETER_STORE_PREFIX
    github: Optional[GitHubSettings] = None


# Environment specific overrides, deep-merged over the defaults
ENVIRONMENT_OVERRIDES: Dict[str, Dict[str, Any]] = {
    'staging': {},
    'production': {},
}


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(dict(merged[key]), value)
        else:
            merged[key] = value
    return merged


def _first(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def load_config(env_name: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> DeploymentConfig:
    """
    Load the deployment configuration.

    Args:
        env_name: Environment name, defaults to ``ENV_NAME`` or ``local``
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        The resolved configuration
    """
    environ = os.environ if environ is None else environ
    env_name = env_name or environ.get('ENV_NAME') or LOCAL_ENV_NAME

    service_name = environ.get('SERVICE_NAME') or DEFAULT_SERVICE_NAME
    defaults: Dict[str, Any] = {
        'env_name': env_name,
        'service': {
            'name': service_name,
            'display_name': environ.get('SERVICE_DISPLAY_NAME') or service_name,
        },
        'parameter_store_prefix': environ.get('APP_BASE_PATH') or DEFAULT_PARAMETER_STORE_PREFIX,
        'region': _first(environ, 'AWS_REGION', 'CDK_DEFAULT_REGION', 'AWS_DEFAULT_REGION') or DEFAULT_REGION,
    }

    if env_name == LOCAL_ENV_NAME:
        defaults['account'] = LOCAL_ACCOUNT_ID
    else:
        defaults['account'] = _first(environ, 'AWS_ACCOUNT_ID', 'CDK_DEFAULT_ACCOUNT')
        defaults['github'] = {
            'repo': environ.get('GITHUB_REPO'),
            'branch': environ.get('GITHUB_BRANCH') or DEFAULT_GITHUB_BRANCH,
            'codestar_connection_id': environ.get('CODESTAR_CONNECTION_ID')
            or f'{{{{resolve:ssm:/platform/{env_name}/github/codestar-connection-id}}}}',
        }

    merged = deep_merge(defaults, ENVIRONMENT_OVERRIDES.get(env_name, {}))
    return DeploymentConfig.model_validate(merged)


def _build_ssm_path(config: DeploymentConfig, visibility: str, env_name: Optional[str], service_name: Optional[str]) -> str:
    path = f'{config.parameter_store_prefix}/{env_name or config.env_name}/{service_name or config.service.name}/{visibility}'
    return re.sub(r'/{2,}', '/', path)


def build_ssm_public_path(config: DeploymentConfig, env_name: Optional[str] = None, service_name: Optional[str] = None) -> str:
    """SSM path of the parameters the service exposes to other services."""
    return _build_ssm_path(config, 'public', env_name, service_name)


def build_ssm_private_path(config: DeploymentConfig, env_name: Optional[str] = None, service_name: Optional[str] = None) -> str:
    """SSM path of the parameters only the service itself reads."""
    return _build_ssm_path(config, 'private', env_name, service_name)
