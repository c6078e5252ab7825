import asyncio
import logging
import random
import threading
import time
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from ledgerkit.modules.session.errors import TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SLEEP_BASE_MS = 10
SLEEP_CAP_MS = 5000

# SLEEP_BASE_MS ** 4 already exceeds the cap
_MAX_EXPONENT = 4


def max_sleep_ms(attempt_number: int) -> int:
    """
    Exclusive upper bound of the sleep for an attempt, in milliseconds.

    Args:
        attempt_number: Retry attempt number (>= 0)

    Returns:
        min(SLEEP_CAP_MS, SLEEP_BASE_MS ** attempt_number) + 1

    Raises:
        ValueError: If attempt_number is negative
    """
    if attempt_number < 0:
        raise ValueError(f"attempt_number must be non-negative, got {attempt_number}")

    exponential = min(SLEEP_CAP_MS, SLEEP_BASE_MS ** min(attempt_number, _MAX_EXPONENT))
    return exponential + 1


def compute_sleep_ms(attempt_number: int) -> float:
    """
    Exponential backoff with full jitter.

    Algorithm from https://aws.amazon.com/blogs/architecture/exponential-backoff-and-jitter/
    """
    return random.random() * max_sleep_ms(attempt_number)


def retry_sleep(attempt_number: int, cancel_event: Optional[threading.Event] = None) -> None:
    """
    Block the calling thread between retry attempts.

    Args:
        attempt_number: Retry attempt number, drives the exponential part
        cancel_event: Optional event that cuts the sleep short when set

    A set cancel_event makes the call return early without raising. The
    event is left set so the caller can see the cancellation.
    """
    delay = compute_sleep_ms(attempt_number) / 1000

    if cancel_event is None:
        time.sleep(delay)
        return

    if cancel_event.wait(delay):
        logger.debug(f"Retry sleep for attempt {attempt_number} cancelled")


async def async_retry_sleep(attempt_number: int) -> None:
    """
    Suspend the current task between retry attempts.

    Same duration as retry_sleep(). Cancelling the task interrupts the
    sleep and the CancelledError propagates to the caller.
    """
    await asyncio.sleep(compute_sleep_ms(attempt_number) / 1000)


def run_with_retry(
    operation: Callable[[], T],
    retry_limit: int,
    retryable: Tuple[Type[BaseException], ...] = (TransportError,),
    cancel_event: Optional[threading.Event] = None,
) -> T:
    """
    Call an operation, retrying retryable failures with backoff.

    Args:
        operation: Zero-argument callable to run
        retry_limit: Maximum number of retries after the first attempt
        retryable: Exception types that trigger a retry
        cancel_event: Optional event that stops further retries when set

    Returns:
        The operation's result

    Raises:
        The last retryable error once retry_limit is exhausted or the
        cancel_event is set; any other error immediately
    """
    attempt = 0
    while True:
        try:
            return operation()
        except retryable as e:
            attempt += 1
            if attempt > retry_limit:
                raise
            logger.warning(f"Retryable error on attempt {attempt} of {retry_limit}: {e}")
            retry_sleep(attempt, cancel_event)
            if cancel_event is not None and cancel_event.is_set():
                raise


async def async_run_with_retry(
    operation: Callable[[], Awaitable[T]],
    retry_limit: int,
    retryable: Tuple[Type[BaseException], ...] = (TransportError,),
) -> T:
    """Coroutine version of run_with_retry()."""
    attempt = 0
    while True:
        try:
            return await operation()
        except retryable as e:
            attempt += 1
            if attempt > retry_limit:
                raise
            logger.warning(f"Retryable error on attempt {attempt} of {retry_limit}: {e}")
            await async_retry_sleep(attempt)
