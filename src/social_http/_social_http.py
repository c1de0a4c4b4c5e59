from functools import cached_property
from logging import getLogger
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from httpx import Response

from ._config import Config
from ._services import AsyncHttpxTransport, HttpService, HttpxTransport
from ._services._transport import AsyncTransport, Transport
from ._utils import setup_logging
from ._utils.constants import LOGGER_NAME
from .models.http import HttpRequest

load_dotenv()


class _DeferredTransport:
    """Resolves the underlying transport on first use."""

    def __init__(self, resolve: Callable[[], Transport]) -> None:
        self._resolve = resolve

    def execute(self, request: HttpRequest) -> Response:
        return self._resolve().execute(request)


class _DeferredAsyncTransport:
    def __init__(self, resolve: Callable[[], AsyncTransport]) -> None:
        self._resolve = resolve

    async def execute_async(self, request: HttpRequest) -> Response:
        return await self._resolve().execute_async(request)


class SocialHttp:
    """Client entry point.

    Resolves configuration from arguments and ``SOCIAL_HTTP_*`` environment
    variables, sets up logging and exposes an ``HttpService`` wired to httpx
    transports. Transports passed in explicitly are used as given and are not
    closed by this client.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        secret: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        debug: bool = False,
        transport: Optional[Transport] = None,
        async_transport: Optional[AsyncTransport] = None,
    ) -> None:
        self._config = Config.from_env(
            base_url=base_url,
            secret=secret,
            timeout=timeout,
            max_retries=max_retries,
            debug=debug or None,
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)
        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'secret'})}\n")

        self._transport = transport
        self._async_transport = async_transport
        self._owned: list[Any] = []

    @property
    def config(self) -> Config:
        return self._config

    @cached_property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(self._config)
            self._owned.append(self._transport)
        return self._transport

    @cached_property
    def async_transport(self) -> AsyncTransport:
        if self._async_transport is None:
            self._async_transport = AsyncHttpxTransport(self._config)
            self._owned.append(self._async_transport)
        return self._async_transport

    @cached_property
    def http(self) -> HttpService:
        # transports are only created once a request of that flavour is sent
        return HttpService(
            _DeferredTransport(lambda: self.transport),
            _DeferredAsyncTransport(lambda: self.async_transport),
        )

    def close(self) -> None:
        """Close owned sync transports.

        An owned async transport cannot be closed synchronously; use ``aclose``
        (or ``async with``) once async requests have been sent.
        """
        for transport in self._owned:
            if isinstance(transport, HttpxTransport):
                transport.close()
            elif isinstance(transport, AsyncHttpxTransport):
                getLogger(LOGGER_NAME).warning(
                    "SocialHttp.close() cannot close the async transport; "
                    "use \"await client.aclose()\" instead"
                )

    async def aclose(self) -> None:
        for transport in self._owned:
            if isinstance(transport, AsyncHttpxTransport):
                await transport.aclose()
            else:
                transport.close()

    def __enter__(self) -> "SocialHttp":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "SocialHttp":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
