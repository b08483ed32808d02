from inspect import getfile, getsourcelines, signature
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 500


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def fetch_layer_depth() -> str:
    return DEPTH_LINE * (call_depth_var.get() - 1)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def bind_arguments(func: Callable[..., Any], *args: Any, **kwargs: Any) -> dict[str, Any]:
    """Name every passed argument so sensitive ones can be masked by keyword."""
    try:
        bound = signature(func).bind_partial(*args, **kwargs)
    except (TypeError, ValueError):
        return {'args': args, 'kwargs': kwargs}
    return {key: value for key, value in bound.arguments.items() if key not in ('self', 'cls')}


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS and value is not None else value


def truncate_content(data: Any) -> Any:
    content = str(data)
    if len(content) <= MAX_CONTENT_LENGTH:
        return data
    return f'{content[:MAX_CONTENT_LENGTH]}...(truncated {len(content) - MAX_CONTENT_LENGTH} chars)'
