from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, TypeVar, Union
from urllib.parse import parse_qsl, urlencode

from httpx import QueryParams

from .exceptions import InvalidArgumentError

P = TypeVar("P", bound="_Parameters")

PrimitiveValue = Union[str, int, float, bool, None]
ParametersInput = Union[
    "_Parameters",
    Mapping[str, Union[PrimitiveValue, Sequence[PrimitiveValue]]],
    Sequence[tuple[str, PrimitiveValue]],
    QueryParams,
    str,
]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """Resolve a member from itself or a case-insensitive method name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise InvalidArgumentError("method", f"Unsupported HTTP method: {value!r}")

    @property
    def allows_body(self) -> bool:
        return self in (
            HttpMethod.POST,
            HttpMethod.PUT,
            HttpMethod.PATCH,
            HttpMethod.DELETE,
        )


def _primitive_to_str(value: PrimitiveValue) -> str:
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"Unsupported parameter value type: {type(value).__name__}")


def _to_pairs(data: Any) -> tuple[tuple[str, str], ...]:
    if isinstance(data, _Parameters):
        return data.pairs
    if isinstance(data, QueryParams):
        return tuple((k, v) for k, v in data.multi_items())
    if isinstance(data, str):
        return tuple(parse_qsl(data.lstrip("?"), keep_blank_values=True))

    if isinstance(data, Mapping):
        raw: list[tuple[Any, Any]] = []
        for key, value in data.items():
            if isinstance(value, (list, tuple)):
                raw.extend((key, item) for item in value)
            else:
                raw.append((key, value))
    elif isinstance(data, (list, tuple)):
        raw = []
        for item in data:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise TypeError(f"Expected a (key, value) pair, got {item!r}")
            raw.append((item[0], item[1]))
    else:
        raise TypeError(f"Unsupported parameters type: {type(data).__name__}")

    pairs = []
    for key, value in raw:
        if not isinstance(key, str):
            raise TypeError(f"Parameter keys must be strings, got {key!r}")
        pairs.append((key, _primitive_to_str(value)))
    return tuple(pairs)


@dataclass(frozen=True)
class _Parameters:
    """Immutable, ordered multimap of string keys to string values.

    Duplicate keys and their order are kept exactly as given. Instances are
    snapshots: the pairs are copied on construction, so later changes to the
    source collection are not reflected.
    """

    pairs: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    _argument_name = "parameters"

    def __post_init__(self) -> None:
        try:
            pairs = _to_pairs(self.pairs)
        except TypeError as e:
            raise InvalidArgumentError(self._argument_name, str(e)) from e
        object.__setattr__(self, "pairs", pairs)

    @classmethod
    def from_input(cls: type[P], data: Optional[ParametersInput]) -> Optional[P]:
        """Normalize any accepted input shape into an instance of this class.

        Args:
            data: ``None``, an existing parameters value, a mapping (list values
                expand into repeated keys), a sequence of ``(key, value)``
                pairs, an ``httpx.QueryParams`` or an encoded ``a=1&b=2`` string.

        Returns:
            ``None`` when ``data`` is ``None``, ``data`` itself when it already is
            an instance of this class, otherwise a new instance.

        Raises:
            InvalidArgumentError: If the shape or a key/value type is not supported.
        """
        if data is None:
            return None
        if type(data) is cls:
            return data
        return cls(data)  # type: ignore[arg-type]

    def items(self) -> list[tuple[str, str]]:
        return list(self.pairs)

    def keys(self) -> list[str]:
        seen: dict[str, None] = {}
        for key, _ in self.pairs:
            seen.setdefault(key)
        return list(seen)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def get_list(self, key: str) -> list[str]:
        return [v for k, v in self.pairs if k == key]

    def add(self: P, key: str, value: PrimitiveValue) -> P:
        """Return a copy with ``key=value`` appended."""
        return type(self)(self.pairs + _to_pairs([(key, value)]))

    @property
    def is_empty(self) -> bool:
        return not self.pairs

    def to_string(self) -> str:
        return urlencode(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.pairs)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class QueryParameters(_Parameters):
    """URL query parameters."""

    _argument_name = "query"


@dataclass(frozen=True)
class BodyData(_Parameters):
    """Form-encoded request body content."""

    _argument_name = "body"


@dataclass(frozen=True)
class HttpRequest:
    """The canonical request handed to a transport.

    Every entry point of ``HttpService`` produces one of these through
    ``build_request`` right before dispatch.
    """

    method: HttpMethod
    url: str
    query: Optional[QueryParameters] = None
    body: Optional[BodyData] = None

    @property
    def full_url(self) -> str:
        """The URL with the query string inserted before any fragment."""
        if self.query is None or self.query.is_empty:
            return self.url
        base, hash_sign, fragment = self.url.partition("#")
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}{self.query.to_string()}{hash_sign}{fragment}"
