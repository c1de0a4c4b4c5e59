from ._logs import mask_headers, setup_logging
from ._request_spec import build_request, validate_url
from ._ssl_context import get_httpx_client_kwargs
from ._user_agent import package_version, user_agent_value

__all__ = [
    "build_request",
    "get_httpx_client_kwargs",
    "mask_headers",
    "package_version",
    "setup_logging",
    "user_agent_value",
    "validate_url",
]
