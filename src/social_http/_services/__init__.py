from ._transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
)
from .http_service import HttpService

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "HttpService",
    "HttpxTransport",
    "Transport",
]
