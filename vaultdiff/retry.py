"""Retrying of operations with exponential back-off."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass
class RetryOptions:
    """Retry limits; delays are in seconds."""

    max_attempts: int = 3
    initial_delay: float = 0.25
    max_delay: float = 5.0
    multiplier: float = 2.0


class RetryableError(Exception):
    """Marks an error after which the operation may be retried."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"retryable: {self.cause}"


def is_retryable(error: BaseException | None) -> bool:
    """Return whether ``error`` or any error it was raised from is retryable."""
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        if isinstance(current, RetryableError):
            return True
        seen.add(id(current))
        current = current.__cause__
    return False


def with_retry(func: Callable[[], T], options: RetryOptions | None = None) -> T:
    """Call ``func`` until it succeeds, retrying only retryable errors.

    Returns what ``func`` returns; after the last attempt the last error is
    raised, and a non-retryable error is raised at once.
    """
    options = options or RetryOptions()
    attempts = max(options.max_attempts, 1)
    delay = options.initial_delay

    for attempt in range(1, attempts + 1):
        try:
            return func()
        except Exception as err:
            if not is_retryable(err) or attempt == attempts:
                raise
        time.sleep(delay)
        delay = min(delay * options.multiplier, options.max_delay)

    raise AssertionError("unreachable")