"""Bounded retry with exponential backoff for pipeline stages."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import urllib3
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from audio_digest.config import RetryConfig
from audio_digest.exceptions import InvalidRequestError, ObjectTooLargeError
from audio_digest.logging import setup_logging

logger = setup_logging()

T = TypeVar("T")

FailureClassifier = Callable[[BaseException], bool]

RETRYABLE_STATUS_CODES = frozenset({408, 429})


def _status_code(error: BaseException) -> int | None:
    """Finds an HTTP status on a provider or storage error, if it carries one."""
    for attr in ("status_code", "code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    response = getattr(error, "response", None)
    for attr in ("status", "status_code"):
        value = getattr(response, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def is_transient_failure(error: BaseException) -> bool:
    """
    Default failure classifier.

    Timeouts, dropped connections and HTTP 408/429/5xx are retryable. Invalid
    input, oversized objects, other 4xx responses and unknown errors are not.
    The error itself and its wrapped ``cause`` are both inspected.
    """
    if isinstance(error, (InvalidRequestError, ObjectTooLargeError)):
        return False

    for candidate in (error, getattr(error, "cause", None)):
        if candidate is None:
            continue
        if isinstance(
            candidate,
            (TimeoutError, ConnectionError, httpx.TransportError, urllib3.exceptions.HTTPError),
        ):
            return True
        status = _status_code(candidate)
        if status is not None:
            return status in RETRYABLE_STATUS_CODES or status >= 500
    return False


def call_with_retry(
    fn: Callable[..., T],
    *args: Any,
    config: RetryConfig,
    classifier: FailureClassifier = is_transient_failure,
    **kwargs: Any,
) -> T:
    """
    Calls ``fn`` until it succeeds, a non-retryable error occurs, or the
    attempt budget is spent. The last error is re-raised unchanged.
    """
    retrying = Retrying(
        stop=stop_after_attempt(config.max_attempts),
        wait=wait_exponential(
            multiplier=config.base_delay_seconds,
            max=config.max_delay_seconds,
        ),
        retry=retry_if_exception(classifier),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return retrying(fn, *args, **kwargs)
