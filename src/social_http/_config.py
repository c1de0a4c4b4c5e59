from os import environ as env
from typing import Any, Optional

from pydantic import BaseModel, Field, HttpUrl, field_validator

from ._utils.constants import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ENV_ACCESS_TOKEN,
    ENV_BACKOFF_FACTOR,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_MAX_RETRIES,
    ENV_TIMEOUT,
)

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    base_url: Optional[str] = None
    secret: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    backoff_factor: float = Field(default=DEFAULT_BACKOFF_FACTOR, ge=0)
    follow_redirects: bool = True
    user_agent: Optional[str] = None
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        # http(s) only; HttpUrl rejects other schemes
        HttpUrl(url=value)
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a config from ``SOCIAL_HTTP_*`` environment variables.

        Keyword arguments that are not ``None`` take precedence over the
        environment.
        """
        values: dict[str, Any] = {
            "base_url": env.get(ENV_BASE_URL),
            "secret": env.get(ENV_ACCESS_TOKEN),
        }
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        if env.get(ENV_MAX_RETRIES):
            values["max_retries"] = env[ENV_MAX_RETRIES]
        if env.get(ENV_BACKOFF_FACTOR):
            values["backoff_factor"] = env[ENV_BACKOFF_FACTOR]
        if env.get(ENV_DEBUG):
            values["debug"] = env[ENV_DEBUG].strip().lower() in _TRUTHY

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
