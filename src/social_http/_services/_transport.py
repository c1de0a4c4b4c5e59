import asyncio
import logging
import math
import random
import time
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any, Optional, Protocol

from httpx import (
    AsyncClient,
    Client,
    Headers,
    HTTPStatusError,
    Response,
    TimeoutException,
)
from tenacity import (
    AsyncRetrying,
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils import get_httpx_client_kwargs, mask_headers, user_agent_value
from .._utils.constants import (
    CONTENT_TYPE_FORM,
    DEFAULT_RETRY_AFTER,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_RETRY_AFTER,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    MAX_BACKOFF_SECONDS,
)
from ..models.exceptions import EnrichedException
from ..models.http import HttpRequest


class Transport(Protocol):
    """Performs the network exchange for a canonical request."""

    def execute(self, request: HttpRequest) -> Response: ...


class AsyncTransport(Protocol):
    """Async counterpart of ``Transport``."""

    async def execute_async(self, request: HttpRequest) -> Response: ...


def is_retryable_exception(exception: BaseException) -> bool:
    if isinstance(exception, TimeoutException):
        return True
    return (
        isinstance(exception, EnrichedException)
        and 500 <= exception.status_code < 600
    )


def parse_retry_after(headers: Headers) -> float:
    """Parse Retry-After header (RFC 6585/7231).

    Args:
        headers: HTTP response headers

    Returns:
        float: Seconds to wait before retry (minimum 0.0, default 1.0 if missing/invalid).
              RFC 7231 allows 0 to indicate immediate retry.
    """
    retry_after = headers.get(HEADER_RETRY_AFTER)
    if not retry_after:
        return DEFAULT_RETRY_AFTER

    try:
        seconds = float(retry_after)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            return DEFAULT_RETRY_AFTER
        # Clamp to non-negative to prevent ValueError in time.sleep()
        return max(seconds, 0.0)

    try:
        retry_date = parsedate_to_datetime(retry_after)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(delta, 0.0)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER


def _with_jitter(retry_after: float) -> float:
    return retry_after + random.uniform(0, 0.1 * retry_after)


class _HttpxTransportBase:
    def __init__(self, config: Optional[Config] = None) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "*/*",
            HEADER_USER_AGENT: self._config.user_agent or user_agent_value(),
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        if not self._config.secret:
            return {}
        return {HEADER_AUTHORIZATION: f"Bearer {self._config.secret}"}

    def _client_kwargs(self) -> dict[str, Any]:
        client_kwargs = {
            **get_httpx_client_kwargs(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
            ),
            "headers": Headers(self.default_headers),
        }
        if self._config.base_url:
            client_kwargs["base_url"] = self._config.base_url

        self._logger.debug(f"HEADERS: {mask_headers(self.default_headers)}")
        return client_kwargs

    def _request_kwargs(self, request: HttpRequest) -> dict[str, Any]:
        # query is rendered into the URL; httpx params would regroup duplicate keys
        kwargs: dict[str, Any] = {}
        if request.body is not None:
            kwargs["content"] = request.body.to_string()
            kwargs["headers"] = {HEADER_CONTENT_TYPE: CONTENT_TYPE_FORM}
        return kwargs

    def _retry_kwargs(self) -> dict[str, Any]:
        return {
            "retry": retry_if_exception(is_retryable_exception),
            "stop": stop_after_attempt(self._config.max_retries + 1),
            "wait": wait_exponential(
                multiplier=self._config.backoff_factor, max=MAX_BACKOFF_SECONDS
            ),
            "before_sleep": before_sleep_log(self._logger, logging.WARNING),
            "reraise": True,
        }

    def _log_rate_limited(self, sleep_time: float, attempt: int) -> None:
        self._logger.warning(
            f"Rate limited (429). Retrying after {sleep_time:.2f}s "
            f"(attempt {attempt + 1}/{self._config.max_retries})"
        )


class HttpxTransport(_HttpxTransportBase):
    """Default synchronous transport backed by ``httpx.Client``.

    Injects default and authorization headers, retries timeouts and 5xx
    responses, honours ``Retry-After`` on 429 and raises ``EnrichedException``
    for any other non-success status.
    """

    def __init__(
        self, config: Optional[Config] = None, client: Optional[Client] = None
    ) -> None:
        super().__init__(config)
        self._client = client or Client(**self._client_kwargs())

    def execute(self, request: HttpRequest) -> Response:
        for attempt in Retrying(**self._retry_kwargs()):
            with attempt:
                return self._send(request)
        raise AssertionError("unreachable")

    def _send(self, request: HttpRequest) -> Response:
        method = request.method.value
        kwargs = self._request_kwargs(request)
        self._logger.debug(f"Request: {method} {request.full_url}")

        for attempt in range(self._config.max_retries + 1):
            response = self._client.request(method, request.full_url, **kwargs)

            if response.status_code == 429 and attempt < self._config.max_retries:
                sleep_time = _with_jitter(parse_retry_after(response.headers))
                self._log_rate_limited(sleep_time, attempt)
                response.close()
                time.sleep(sleep_time)
                continue

            break

        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            response.close()
            raise EnrichedException(e) from e

        return response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncHttpxTransport(_HttpxTransportBase):
    """Async counterpart of ``HttpxTransport`` backed by ``httpx.AsyncClient``."""

    def __init__(
        self, config: Optional[Config] = None, client: Optional[AsyncClient] = None
    ) -> None:
        super().__init__(config)
        self._client = client or AsyncClient(**self._client_kwargs())

    async def execute_async(self, request: HttpRequest) -> Response:
        async for attempt in AsyncRetrying(**self._retry_kwargs()):
            with attempt:
                return await self._send(request)
        raise AssertionError("unreachable")

    async def _send(self, request: HttpRequest) -> Response:
        method = request.method.value
        kwargs = self._request_kwargs(request)
        self._logger.debug(f"Request: {method} {request.full_url}")

        for attempt in range(self._config.max_retries + 1):
            response = await self._client.request(method, request.full_url, **kwargs)

            if response.status_code == 429 and attempt < self._config.max_retries:
                sleep_time = _with_jitter(parse_retry_after(response.headers))
                self._log_rate_limited(sleep_time, attempt)
                await response.aclose()  # Release connection before retry
                await asyncio.sleep(sleep_time)
                continue

            break

        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            await response.aclose()
            raise EnrichedException(e) from e

        return response

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
