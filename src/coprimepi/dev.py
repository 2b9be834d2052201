"""
Development helpers for timing calls.
"""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cpu_timed(func: Callable[..., T], *args: Any, **kwargs: Any) -> tuple[T, float, float]:
    """
    Call `func` and measure how long it took.

    Returns:
        A tuple of (result, CPU seconds, wall-clock seconds).
    """
    cpu_start = time.process_time()
    wall_start = time.perf_counter()
    result = func(*args, **kwargs)
    wall_seconds = time.perf_counter() - wall_start
    cpu_seconds = time.process_time() - cpu_start
    return result, cpu_seconds, wall_seconds


def timer(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator logging the CPU and wall-clock time of each call at DEBUG level."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        result, cpu_seconds, wall_seconds = cpu_timed(func, *args, **kwargs)
        logger.debug(f"{func.__name__}: {cpu_seconds:.6f} s CPU, {wall_seconds:.6f} s wall")
        return result
    return wrapper
