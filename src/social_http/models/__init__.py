from .exceptions import EnrichedException, InvalidArgumentError, SocialHttpError
from .http import BodyData, HttpMethod, HttpRequest, QueryParameters
from .options import NOT_GIVEN, NotGiven, ReadOptions, WriteOptions

__all__ = [
    "BodyData",
    "EnrichedException",
    "HttpMethod",
    "HttpRequest",
    "InvalidArgumentError",
    "NOT_GIVEN",
    "NotGiven",
    "QueryParameters",
    "ReadOptions",
    "SocialHttpError",
    "WriteOptions",
]
