from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 500

# Matches `card_number='4111'`, `'cvv': '123'` and `"phone_number": "+250..."`
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?(?:%s)['"]?\s*[=:]\s*)(['"])(.*?)\2""" % '|'.join(sorted(SENSITIVE_KEYWORDS))
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def increase_call_depth() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if layer <= 0:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def mask_sensitive(data: Any) -> Any:
    if data is None or isinstance(data, bool | int | float):
        return data
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf'\1\2{MASK}\2', data_str)
    return data if masked == data_str else masked


def truncate_content(data: Any) -> Any:
    if isinstance(data, str) and len(data) > MAX_CONTENT_LENGTH:
        return f'{data[:MAX_CONTENT_LENGTH]}...(truncated {len(data) - MAX_CONTENT_LENGTH} chars)'
    return data
