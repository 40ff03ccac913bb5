# ================================================================================
# Stale Element Retry Module
# ================================================================================
#
# Re-runs an operation when the element it resolved went stale mid-flight
# (the page re-rendered between lookup and use).
#
# Every attempt starts from scratch, so the operation must re-resolve its
# locators each time; a handle that went stale is never reused.
#
# Only StaleReferenceError is retried. Any other failure propagates on the
# first attempt, and the last permitted attempt propagates whatever it raises.
#
# Usage:
#   title = with_retry(lambda: executor.wait_and_read_text(HEADING))
#
#   @retry_on_stale(RetryPolicy(max_attempts=5, delay_seconds=0.5))
#   def open_menu(): ...
#
# ================================================================================

import time
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

from loguru import logger

from .errors import StaleReferenceError


T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry budget.

    Attributes:
        max_attempts: Total invocations allowed, at least 1
        delay_seconds: Fixed sleep between attempts, at least 0
    """

    max_attempts: int = 3
    delay_seconds: float = 0.2

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {self.delay_seconds}")


DEFAULT_RETRY_POLICY = RetryPolicy()


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    STALE = "stale"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one attempt: a value, a stale reference, or another failure."""

    kind: OutcomeKind
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def capture(cls, operation: Callable[[], T]) -> "Outcome[T]":
        try:
            return cls(OutcomeKind.SUCCESS, value=operation())
        except StaleReferenceError as e:
            return cls(OutcomeKind.STALE, error=e)
        except Exception as e:
            return cls(OutcomeKind.FAILURE, error=e)

    def unwrap(self) -> T:
        if self.kind is OutcomeKind.SUCCESS:
            return self.value
        raise self.error


def with_retry(
    operation: Callable[[], T],
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Run `operation`, re-running it from scratch on stale references.

    Args:
        operation: Zero-argument callable; must be safe to call repeatedly
        policy: Attempt budget and delay
        sleep: Sleep function (injectable for tests)

    Returns:
        The operation's result

    Raises:
        StaleReferenceError: Still stale on the last attempt
        Exception: Any non-stale failure, unmodified, on the attempt it occurs
    """
    name = getattr(operation, "__name__", repr(operation))

    for attempt in range(1, policy.max_attempts + 1):
        outcome = Outcome.capture(operation)

        if outcome.kind is OutcomeKind.SUCCESS:
            if attempt > 1:
                logger.debug(f"{name} succeeded on attempt {attempt}")
            return outcome.value

        if outcome.kind is OutcomeKind.STALE and attempt < policy.max_attempts:
            logger.warning(
                f"Attempt {attempt}/{policy.max_attempts} hit a stale element in "
                f"{name}: {outcome.error}. Retrying in {policy.delay_seconds}s..."
            )
            sleep(policy.delay_seconds)
            continue

        if outcome.kind is OutcomeKind.STALE:
            logger.error(
                f"All {policy.max_attempts} attempts hit a stale element in {name}"
            )
        return outcome.unwrap()

    # range() above always runs at least once and every branch exits
    raise AssertionError("unreachable")


def retry_on_stale(policy: RetryPolicy = DEFAULT_RETRY_POLICY):
    """
    Decorator form of `with_retry`.

    Args:
        policy: RetryPolicy controlling attempts and delay
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            def attempt() -> T:
                return func(*args, **kwargs)

            attempt.__name__ = func.__name__
            return with_retry(attempt, policy)

        return wrapper

    return decorator


__all__ = [
    "RetryPolicy",
    "DEFAULT_RETRY_POLICY",
    "Outcome",
    "OutcomeKind",
    "with_retry",
    "retry_on_stale",
]
