import json
import logging
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from .auth import AuthStrategy, BearerTokenAuth
from .config import APIConfig
from .exceptions import MaxRetriesExceededError, RequestEncodeError
from .response import AttemptOutcome
from .retry import build_retrying

_logger = logging.getLogger(__name__)
log = structlog.wrap_logger(_logger)

T = TypeVar("T")


class APIClient:
    """Request execution engine for the ackack.io API.

    Every call is authenticated, retried on transport failures, 5xx responses and
    rate limiting, and either returns the decoded body or raises an ``AckAckError``.
    The client keeps no per-call state, so one instance can serve many concurrent
    calls. Bound a call's total duration with ``asyncio.wait_for`` or
    ``asyncio.timeout``; waits between attempts are cancellable.
    """

    def __init__(self,
                 *,  # Force key-value pairs for input
                 api_key: Optional[str] = None,
                 base_url: Optional[str] = None,
                 version: Optional[str] = None,
                 config: Optional[APIConfig] = None,
                 auth_strategy: Optional[AuthStrategy] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 sleep: Optional[Callable[[float], Awaitable[None]]] = None,
                 **config_kwargs,
                 ):
        self.config = config or APIConfig.build(api_key=api_key, base_url=base_url, version=version, **config_kwargs)
        self.auth_strategy = auth_strategy or BearerTokenAuth(self.config.api_key.get_secret_value())
        self._sleep = sleep
        self.client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self.config.default_headers,
            transport=transport,
        )

    async def __aenter__(self) -> 'APIClient':
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    async def aclose(self):
        await self.client.aclose()

    def log_verbose(self, msg, logger=None, **kwargs):
        if not logger:
            logger = log
        if self.config.verbose:
            logger.debug(msg, **kwargs)

    @staticmethod
    def _encode_body(body: Any) -> Optional[bytes]:
        if body is None:
            return None
        if isinstance(body, BaseModel):
            return body.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")
        try:
            return json.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestEncodeError(f"failed to marshal request body: {e}") from e

    async def _perform_request(self, method: str, path: str, body: Any) -> AttemptOutcome:
        """Send one attempt. The body is encoded again every time, so a retry never sends an empty stream."""
        request = self.client.build_request(method=method, url=path, content=self._encode_body(body))
        self.auth_strategy.authenticate(request)
        try:
            response = await self.client.send(request)
        except httpx.TransportError as e:
            return AttemptOutcome.from_transport_error(e)
        return AttemptOutcome.from_response(response)

    def _handle_outcome(self, outcome: AttemptOutcome, response_model: Optional[Type[T]]) -> Optional[T]:
        outcome.raise_for_outcome(rate_limit_default_wait=self.config.rate_limit_default_wait)
        return outcome.decode(response_model)

    async def execute(self, method: str, path: str, body: Any = None, response_model: Optional[Type[T]] = None) -> Optional[T]:
        """
        Perform one logical call, retrying as needed.

        Args:
            method (str): HTTP method, e.g. 'GET'
            path (str): Path relative to the base URL, including any query string
            body (optional): A pydantic model or JSON-serializable object to send
            response_model (optional): Any type pydantic can validate the response body into

        Returns:
            The decoded body, or None when no response_model was given or the body is empty

        Raises:
            ClientError: 4xx response other than 429; never retried
            ServerError: 5xx response on the final attempt
            RateLimitError: 429 response on the final attempt
            RequestFailedError: Transport failure on the final attempt
            ResponseDecodeError: 2xx response whose body does not match response_model
            RequestEncodeError: The body could not be serialized
        """
        __logger = log.new(method=method, path=path)
        async for attempt in build_retrying(self.config, sleep=self._sleep):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                self.log_verbose("Sending request", logger=__logger, attempt=attempt_number)
                outcome = await self._perform_request(method, path, body)
                self.log_verbose("Received response", logger=__logger, attempt=attempt_number, status_code=outcome.status_code)
                return self._handle_outcome(outcome, response_model)
        raise MaxRetriesExceededError("max retries exceeded")

    async def get(self, path: str, response_model: Optional[Type[T]] = None) -> Optional[T]:
        """Send a GET request"""
        return await self.execute("GET", path, response_model=response_model)

    async def post(self, path: str, body: Any = None, response_model: Optional[Type[T]] = None) -> Optional[T]:
        """Send a POST request"""
        return await self.execute("POST", path, body=body, response_model=response_model)

    async def put(self, path: str, body: Any = None, response_model: Optional[Type[T]] = None) -> Optional[T]:
        """Send a PUT request"""
        return await self.execute("PUT", path, body=body, response_model=response_model)

    async def delete(self, path: str, body: Any = None) -> None:
        """Send a DELETE request; the response body is ignored"""
        await self.execute("DELETE", path, body=body)
