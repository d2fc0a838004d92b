# Environment variables
ENV_BASE_URL = "NETLINKER_BASE_URL"
ENV_API_VERSION = "NETLINKER_API_VERSION"
ENV_ENVIRONMENT = "NETLINKER_ENVIRONMENT"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CACHE_CONTROL = "Cache-Control"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded; charset=utf-8"

# Request defaults
DEFAULT_TIMEOUT_INTERVAL = 30.0
NO_CACHE = "no-cache"

LOGGER_NAME = "netlinker"
