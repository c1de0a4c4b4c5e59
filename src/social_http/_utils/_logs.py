import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(should_debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Installs a single stderr handler on the ``social_http`` logger, so calling
    this more than once only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)

    if not any(getattr(h, "_social_http", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._social_http = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def mask_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        key: "***" if key.lower() == "authorization" else value
        for key, value in headers.items()
    }
