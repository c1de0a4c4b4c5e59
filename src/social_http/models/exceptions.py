from typing import Optional

from httpx import HTTPStatusError, ResponseNotRead

MAX_CONTENT_LENGTH = 500


class SocialHttpError(Exception):
    """Base class for every error raised by social_http."""


class InvalidArgumentError(SocialHttpError, ValueError):
    """Raised before any I/O when a caller passes an unusable argument.

    Attributes:
        argument: Name of the offending parameter (e.g. ``url`` or ``options``).
    """

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        self.argument = argument
        self.message = message or f"Invalid value for argument '{argument}'"
        super().__init__(self.message)


class EnrichedException(SocialHttpError):
    """A non-success HTTP status, with the request and response details attached."""

    def __init__(self, error: HTTPStatusError) -> None:
        self.status_code = error.response.status_code
        self.url = str(error.request.url)
        self.http_method = error.request.method

        try:
            content = error.response.text
        except ResponseNotRead:
            content = ""
        if len(content) > MAX_CONTENT_LENGTH:
            content = content[:MAX_CONTENT_LENGTH] + "... (truncated)"
        self.response_content = content

        super().__init__(
            f"\n\tRequest URL: {self.url}"
            f"\n\tHTTP Method: {self.http_method}"
            f"\n\tStatus Code: {self.status_code}"
            f"\n\tResponse Content: {self.response_content}"
        )
