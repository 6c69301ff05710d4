import asyncio
import logging

import structlog
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt
from tenacity.wait import wait_base

from .config import APIConfig
from .exceptions import MaxRetriesExceededError, RateLimitError, RequestFailedError, ServerError

_logger = logging.getLogger(__name__)
log = structlog.wrap_logger(_logger)

# Everything else (client errors, decode errors, cancellation) ends the call on the spot
RETRYABLE_ERRORS = (RequestFailedError, ServerError, RateLimitError)


class wait_linear_or_retry_after(wait_base):
    """Linear backoff (base, 2*base, ...), replaced by the server's Retry-After after a 429"""

    def __init__(self, base_delay: float):
        self.base_delay = base_delay

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError):
            return error.retry_after
        return self.base_delay * retry_state.attempt_number


def log_before_sleep(retry_state: RetryCallState):
    error = retry_state.outcome.exception()
    log.warning(
        "Retrying request",
        attempt=retry_state.attempt_number,
        wait=retry_state.next_action.sleep,
        error=str(error),
    )


def raise_last_error(retry_state: RetryCallState):
    """Out of attempts: surface the last recorded cause"""
    # A 429 on the final attempt raises now; sleeping out its Retry-After would only delay the same error
    error = retry_state.outcome.exception() if retry_state.outcome else None
    log.error("Exceeded maximum attempts", attempts=retry_state.attempt_number, error=str(error))
    if error is None:
        raise MaxRetriesExceededError(f"max retries exceeded after {retry_state.attempt_number} attempts")
    raise error


def build_retrying(config: APIConfig, sleep=None) -> AsyncRetrying:
    """Retry policy for one logical call; build a fresh one per call"""
    return AsyncRetrying(
        stop=stop_after_attempt(config.max_attempts),
        wait=wait_linear_or_retry_after(config.retry_base_delay),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        before_sleep=log_before_sleep,
        retry_error_callback=raise_last_error,
        sleep=sleep or asyncio.sleep,
    )
