"""One-shot helpers.

Each call opens a ``SocialHttp`` client configured from the environment and
the given keyword arguments, sends a single request and closes the client.
Prefer a long-lived ``SocialHttp`` when sending many requests.
"""

from typing import Any, Optional, Union

from httpx import Response

from ._services import HttpService
from ._social_http import SocialHttp
from ._utils._request_spec import OptionsInput, QueryInput
from .models.http import HttpMethod, ParametersInput
from .models.options import NOT_GIVEN


def send(
    method: Union[HttpMethod, str],
    url: str,
    query: QueryInput = None,
    body: Optional[ParametersInput] = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    """Send a single request. ``client_kwargs`` are passed to ``SocialHttp``."""
    with SocialHttp(**client_kwargs) as client:
        service = HttpService(client.transport)
        return service.send(method, url, query, body, options=options)


def get(
    url: str,
    query: QueryInput = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    return send(HttpMethod.GET, url, query, options=options, **client_kwargs)


def post(
    url: str,
    query: QueryInput = None,
    body: Optional[ParametersInput] = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    return send(HttpMethod.POST, url, query, body, options=options, **client_kwargs)


def put(
    url: str,
    query: QueryInput = None,
    body: Optional[ParametersInput] = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    return send(HttpMethod.PUT, url, query, body, options=options, **client_kwargs)


def patch(
    url: str,
    query: QueryInput = None,
    body: Optional[ParametersInput] = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    return send(HttpMethod.PATCH, url, query, body, options=options, **client_kwargs)


def delete(
    url: str,
    query: QueryInput = None,
    body: Optional[ParametersInput] = None,
    *,
    options: OptionsInput = NOT_GIVEN,
    **client_kwargs: Any,
) -> Response:
    return send(HttpMethod.DELETE, url, query, body, options=options, **client_kwargs)
