from ._api import delete, get, patch, post, put, send
from ._config import Config
from ._services import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpService,
    HttpxTransport,
    Transport,
)
from ._social_http import SocialHttp
from ._utils import build_request
from .models import (
    NOT_GIVEN,
    BodyData,
    EnrichedException,
    HttpMethod,
    HttpRequest,
    InvalidArgumentError,
    QueryParameters,
    ReadOptions,
    SocialHttpError,
    WriteOptions,
)

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "BodyData",
    "Config",
    "EnrichedException",
    "HttpMethod",
    "HttpRequest",
    "HttpService",
    "HttpxTransport",
    "InvalidArgumentError",
    "NOT_GIVEN",
    "QueryParameters",
    "ReadOptions",
    "SocialHttp",
    "SocialHttpError",
    "Transport",
    "WriteOptions",
    "build_request",
    "delete",
    "get",
    "patch",
    "post",
    "put",
    "send",
]
