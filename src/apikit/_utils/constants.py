# Environment variables
ENV_TIMEOUT = "APIKIT_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "APIKIT_FOLLOW_REDIRECTS"
ENV_VERIFY_SSL = "APIKIT_VERIFY_SSL"
ENV_MAX_WORKERS = "APIKIT_MAX_WORKERS"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
USER_AGENT = "apikit-python/0.1.0"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Logger
LOGGER_NAME = "apikit"
