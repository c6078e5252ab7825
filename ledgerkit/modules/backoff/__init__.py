"""
Backoff Module - Black Box Interface

Purpose: Space out retries of failed session operations
Interface: retry_sleep(), async_retry_sleep(), run_with_retry()
Hidden: Jitter source, exponent saturation, cancellation handling

Bounding the number of retries is the caller's job (see BaseSession.retry_limit).
"""

from .backoff import (
    SLEEP_BASE_MS,
    SLEEP_CAP_MS,
    async_retry_sleep,
    async_run_with_retry,
    compute_sleep_ms,
    max_sleep_ms,
    retry_sleep,
    run_with_retry,
)

__all__ = [
    "SLEEP_BASE_MS",
    "SLEEP_CAP_MS",
    "async_retry_sleep",
    "async_run_with_retry",
    "compute_sleep_ms",
    "max_sleep_ms",
    "retry_sleep",
    "run_with_retry",
]
