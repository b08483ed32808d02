"""
Service context extraction for log traceability.

Identifies the embedding host process so ledger logs from several hosts can be
told apart once they are collected in one place.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticketing-ledger')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
