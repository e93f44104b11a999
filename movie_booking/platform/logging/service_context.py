"""
Service context attached to every log line.

Format: `<service>@<deploy env>:<pid>`. The service name is registered by the
app factory when a service builds its application; a SERVICE_NAME environment
variable set by the deployment takes precedence.
"""

import os


DEFAULT_SERVICE_NAME = 'movie-booking'


def _build_context(service_name: str) -> str:
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{os.getenv("SERVICE_NAME") or service_name}@{deploy_env}:{os.getpid()}'


_service_context = _build_context(DEFAULT_SERVICE_NAME)


def set_service_name(service_name: str) -> None:
    global _service_context
    _service_context = _build_context(service_name)


def get_service_context() -> str:
    return _service_context
