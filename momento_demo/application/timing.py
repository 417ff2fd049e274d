from __future__ import annotations

import functools
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from .operation_context import operation_var

logger = logging.getLogger(__name__)

T = TypeVar("T")


def measure_processing_time(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Log the wall-clock time an async operation takes, in milliseconds.

    The operation name is bound to ``operation_var`` while the call runs so
    that log records emitted from inside it are tagged with it.
    """
    operation = func.__name__

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        token = operation_var.set(operation)
        start = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("%s took %.2f ms", operation, elapsed_ms)
            operation_var.reset(token)

    return wrapper
