from types import SimpleNamespace

import httpx
import pytest

from audio_digest.config import RetryConfig
from audio_digest.domain import call_with_retry, is_transient_failure
from audio_digest.exceptions import (
    FetchError,
    InvalidRequestError,
    ObjectTooLargeError,
    SummarizationError,
)


class StatusError(Exception):
    def __init__(self, status):
        super().__init__(f"HTTP {status}")
        self.response = SimpleNamespace(status=status)


class CodedError(Exception):
    def __init__(self, code):
        super().__init__(f"code {code}")
        self.code = code


@pytest.mark.parametrize(
    "error",
    [
        TimeoutError(),
        ConnectionError(),
        httpx.ConnectTimeout("slow"),
        StatusError(503),
        CodedError(429),
        FetchError("k", StatusError(500)),
        SummarizationError("boom", CodedError(502)),
    ],
)
def test_transient_failures_are_retryable(error):
    assert is_transient_failure(error)


@pytest.mark.parametrize(
    "error",
    [
        InvalidRequestError("missing"),
        ObjectTooLargeError("k", 10),
        FetchError("k", StatusError(404)),
        SummarizationError("bad request", CodedError(400)),
        FetchError("k", CodedError("NoSuchKey")),
        ValueError("malformed"),
    ],
)
def test_permanent_failures_are_not_retryable(error):
    assert not is_transient_failure(error)


def _flaky(failures, result="ok"):
    calls = []

    def fn():
        calls.append(1)
        if failures:
            raise failures.pop(0)
        return result

    return fn, calls


def test_transient_failure_is_retried_until_success():
    fn, calls = _flaky([TimeoutError(), TimeoutError()])
    config = RetryConfig(max_attempts=3, base_delay_seconds=0, max_delay_seconds=0)

    assert call_with_retry(fn, config=config) == "ok"
    assert len(calls) == 3


def test_retries_stop_at_max_attempts_and_reraise_last_error():
    last = TimeoutError("third")
    fn, calls = _flaky([TimeoutError(), TimeoutError(), last, TimeoutError()])
    config = RetryConfig(max_attempts=3, base_delay_seconds=0, max_delay_seconds=0)

    with pytest.raises(TimeoutError) as exc_info:
        call_with_retry(fn, config=config)

    assert exc_info.value is last
    assert len(calls) == 3


def test_injected_classifier_controls_retries():
    fn, calls = _flaky([TimeoutError()])
    config = RetryConfig(max_attempts=5, base_delay_seconds=0, max_delay_seconds=0)

    with pytest.raises(TimeoutError):
        call_with_retry(fn, config=config, classifier=lambda e: False)

    assert len(calls) == 1
