import re
from dataclasses import dataclass, field
from typing import Any, Optional, Type

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    APIError, ClientError, RateLimitError, RequestFailedError, ResponseDecodeError, ServerError,
)
from .models import ErrorResponse

# Plain optionally signed ASCII integer; no whitespace, underscores or HTTP-dates
RETRY_AFTER_SECONDS = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AttemptOutcome:
    """What a single HTTP attempt produced: a response, or a transport failure"""
    status_code: Optional[int] = None
    content: bytes = b""
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    transport_error: Optional[httpx.TransportError] = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "AttemptOutcome":
        return cls(status_code=response.status_code, content=response.content, headers=response.headers)

    @classmethod
    def from_transport_error(cls, error: httpx.TransportError) -> "AttemptOutcome":
        return cls(transport_error=error)

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    @property
    def is_rate_limit_error(self) -> bool:
        return self.status_code == httpx.codes.TOO_MANY_REQUESTS

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500 and not self.is_rate_limit_error

    def retry_after(self, default: float) -> float:
        """Seconds requested by the Retry-After header; ``default`` when absent or not an integer"""
        value = self.headers.get("Retry-After")
        if value is None:
            return default
        if not RETRY_AFTER_SECONDS.fullmatch(value):
            return default
        return float(max(int(value), 0))

    def error_response(self) -> ErrorResponse:
        if not self.content:
            return ErrorResponse()
        try:
            return ErrorResponse.model_validate_json(self.content)
        except ValidationError:
            return ErrorResponse()

    def api_error(self) -> APIError:
        """Build the APIError matching this outcome's status class"""
        parsed = self.error_response()
        message = parsed.message or parsed.error or httpx.codes.get_reason_phrase(self.status_code) or f"HTTP {self.status_code}"
        error_class = ClientError if self.is_client_error else ServerError
        return error_class(self.status_code, message, error_field=parsed.error)

    def decode(self, response_model: Optional[Type]) -> Any:
        """Decode the body into ``response_model``; nothing to decode yields None"""
        if response_model is None or not self.content:
            return None
        try:
            return TypeAdapter(response_model).validate_json(self.content)
        except ValidationError as e:
            raise ResponseDecodeError(f"failed to decode response: {e}") from e

    def raise_for_outcome(self, rate_limit_default_wait: float) -> None:
        """Raise the exception classifying a non-successful outcome"""
        if self.transport_error is not None:
            raise RequestFailedError(f"request failed: {self.transport_error!r}") from self.transport_error
        if self.is_success:
            return
        if self.is_rate_limit_error:
            raise RateLimitError(retry_after=self.retry_after(rate_limit_default_wait))
        raise self.api_error()
