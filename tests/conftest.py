import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure local source package (src/social_http) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from social_http._config import Config  # noqa: E402
from social_http.models.http import HttpRequest  # noqa: E402

_ENV_VARS = (
    "SOCIAL_HTTP_BASE_URL",
    "SOCIAL_HTTP_ACCESS_TOKEN",
    "SOCIAL_HTTP_TIMEOUT",
    "SOCIAL_HTTP_MAX_RETRIES",
    "SOCIAL_HTTP_BACKOFF_FACTOR",
    "SOCIAL_HTTP_DEBUG",
)


class RecordingTransport:
    """Transport double that records every request it is asked to execute."""

    def __init__(self, response: Any = None) -> None:
        self.requests: list[HttpRequest] = []
        self.response = response if response is not None else object()

    def execute(self, request: HttpRequest) -> Any:
        self.requests.append(request)
        return self.response


class RecordingAsyncTransport:
    def __init__(self, response: Any = None) -> None:
        self.requests: list[HttpRequest] = []
        self.response = response if response is not None else object()

    async def execute_async(self, request: HttpRequest) -> Any:
        self.requests.append(request)
        return self.response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def secret() -> str:
    return "secret"


@pytest.fixture
def config(base_url: str, secret: str) -> Config:
    return Config(base_url=base_url, secret=secret, backoff_factor=0)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def async_transport() -> RecordingAsyncTransport:
    return RecordingAsyncTransport()
