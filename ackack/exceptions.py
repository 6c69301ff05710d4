from typing import Optional

from httpx import codes


class AckAckError(Exception):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class ConfigurationError(AckAckError):
    """Raised when the client cannot be built from the supplied settings"""


class RequestEncodeError(AckAckError):
    """Raised when a request body cannot be serialized to JSON"""


class ResponseDecodeError(AckAckError):
    """Raised when a successful response carries a body that does not match the expected shape"""


class RequestFailedError(AckAckError):
    """Raised when no response was received (connection failure, timeout, broken read)"""


class MaxRetriesExceededError(AckAckError): ...


class PaginationError(AckAckError): ...


class APIError(AckAckError):
    """An error response from the ackack.io API"""

    def __init__(self, status_code: int, message: str = None, error_field: Optional[str] = None):
        self.status_code = int(status_code)
        self.message = message or codes.get_reason_phrase(status_code)
        self.error_field = error_field or None
        super().__init__(str(self))

    def __str__(self):
        if self.error_field:
            return f"API error (status {self.status_code}): {self.message} - {self.error_field}"
        return f"API error (status {self.status_code}): {self.message}"


class ClientError(APIError): ...


class ServerError(APIError): ...


class RateLimitError(APIError):

    def __init__(self, status_code: int = codes.TOO_MANY_REQUESTS, message: str = None, retry_after: float = 60.0, **kwargs):
        self.retry_after = retry_after
        message = message or f"rate limited, retry after {retry_after:g} seconds"
        super().__init__(status_code, message, **kwargs)


def _has_status(err: BaseException, status_code: int) -> bool:
    return isinstance(err, APIError) and err.status_code == status_code


def is_not_found_error(err: BaseException) -> bool:
    return _has_status(err, codes.NOT_FOUND)


def is_rate_limit_error(err: BaseException) -> bool:
    return _has_status(err, codes.TOO_MANY_REQUESTS)


def is_unauthorized_error(err: BaseException) -> bool:
    return _has_status(err, codes.UNAUTHORIZED)


def is_forbidden_error(err: BaseException) -> bool:
    return _has_status(err, codes.FORBIDDEN)


def is_bad_request_error(err: BaseException) -> bool:
    return _has_status(err, codes.BAD_REQUEST)
