from logging import getLogger
from typing import Optional, Union

from httpx import Response

from .._utils import build_request
from .._utils._request_spec import OptionsInput, QueryInput
from .._utils.constants import LOGGER_NAME
from ..models.exceptions import SocialHttpError
from ..models.http import HttpMethod, ParametersInput
from ..models.options import NOT_GIVEN
from ._transport import AsyncTransport, Transport


class HttpService:
    """Builds canonical requests and dispatches them through a transport.

    ``send`` and ``send_async`` are the only code paths; ``get``, ``post``,
    ``put``, ``patch`` and ``delete`` (and their ``_async`` variants) only fix
    the method. Responses are returned exactly as the transport produced them
    and transport errors are never caught here.

    Query and body data can be given as mappings (list values repeat the key),
    sequences of ``(key, value)`` pairs, encoded strings or pre-built
    ``QueryParameters``/``BodyData``. Alternatively pass a single
    ``ReadOptions``/``WriteOptions`` value, either as ``options=`` or in place
    of the query.

    Examples:
        ```python
        from social_http import HttpService, HttpxTransport

        service = HttpService(HttpxTransport())

        response = service.get("https://example.com/search", {"q": "python"})
        response = service.post(
            "https://example.com/comments", body={"text": "Hello"}
        )
        ```
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        async_transport: Optional[AsyncTransport] = None,
    ) -> None:
        if transport is None and async_transport is None:
            raise SocialHttpError("HttpService requires at least one transport")
        self._logger = getLogger(LOGGER_NAME)
        self._transport = transport
        self._async_transport = async_transport

    def send(
        self,
        method: Union[HttpMethod, str],
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        """Send a request with the given method.

        Args:
            method: HTTP method, as a member or a case-insensitive name.
            url: Request URL, used verbatim.
            query: Query parameters, or a ``ReadOptions`` value.
            body: Body data; only for methods that carry a body.
            options: Options providing the query and, for ``WriteOptions``, the body.
                Mutually exclusive with ``query`` and ``body``.

        Returns:
            Response: The transport's response, unmodified.

        Raises:
            InvalidArgumentError: If the arguments are invalid. Nothing is sent.
        """
        request = build_request(method, url, query, body, options=options)
        if self._transport is None:
            raise SocialHttpError("No synchronous transport configured")

        self._logger.debug(f"Dispatching {request.method.value} {request.url}")
        return self._transport.execute(request)

    async def send_async(
        self,
        method: Union[HttpMethod, str],
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        """Asynchronously send a request with the given method. See ``send``."""
        request = build_request(method, url, query, body, options=options)
        if self._async_transport is None:
            raise SocialHttpError("No asynchronous transport configured")

        self._logger.debug(f"Dispatching {request.method.value} {request.url}")
        return await self._async_transport.execute_async(request)

    def get(
        self, url: str, query: QueryInput = None, *, options: OptionsInput = NOT_GIVEN
    ) -> Response:
        """Send a GET request. Write options only contribute their query."""
        return self.send(HttpMethod.GET, url, query, options=options)

    async def get_async(
        self, url: str, query: QueryInput = None, *, options: OptionsInput = NOT_GIVEN
    ) -> Response:
        return await self.send_async(HttpMethod.GET, url, query, options=options)

    def post(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        """Send a POST request."""
        return self.send(HttpMethod.POST, url, query, body, options=options)

    async def post_async(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return await self.send_async(
            HttpMethod.POST, url, query, body, options=options
        )

    def put(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return self.send(HttpMethod.PUT, url, query, body, options=options)

    async def put_async(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return await self.send_async(HttpMethod.PUT, url, query, body, options=options)

    def patch(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return self.send(HttpMethod.PATCH, url, query, body, options=options)

    async def patch_async(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return await self.send_async(
            HttpMethod.PATCH, url, query, body, options=options
        )

    def delete(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return self.send(HttpMethod.DELETE, url, query, body, options=options)

    async def delete_async(
        self,
        url: str,
        query: QueryInput = None,
        body: Optional[ParametersInput] = None,
        *,
        options: OptionsInput = NOT_GIVEN,
    ) -> Response:
        return await self.send_async(
            HttpMethod.DELETE, url, query, body, options=options
        )
