# Environment variables
ENV_BASE_URL = "SOCIAL_HTTP_BASE_URL"
ENV_ACCESS_TOKEN = "SOCIAL_HTTP_ACCESS_TOKEN"
ENV_TIMEOUT = "SOCIAL_HTTP_TIMEOUT"
ENV_MAX_RETRIES = "SOCIAL_HTTP_MAX_RETRIES"
ENV_BACKOFF_FACTOR = "SOCIAL_HTTP_BACKOFF_FACTOR"
ENV_DEBUG = "SOCIAL_HTTP_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_USER_AGENT = "User-Agent"

CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# Defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 1.0
DEFAULT_RETRY_AFTER = 1.0
MAX_BACKOFF_SECONDS = 10.0

LOGGER_NAME = "social_http"
PACKAGE_NAME = "social-http"
