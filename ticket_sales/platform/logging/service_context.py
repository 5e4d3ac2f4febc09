"""
Service context extraction for logging.

Identifies the running process in every log line so that output from
several interpreters sharing one log directory can be told apart.
"""

import os
from functools import lru_cache

from ticket_sales.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', settings.PROJECT_NAME.lower().replace(' ', '-'))
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
