# Environment variables
ENV_BASE_URL = "WPENGINE_URL"
ENV_USERNAME = "WPENGINE_USERNAME"
ENV_PASSWORD = "WPENGINE_PASSWORD"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"

CONTENT_TYPE_JSON = "application/json"

# Defaults
DEFAULT_BASE_URL = "https://api.wpengineapi.com/v0/"
DEFAULT_TIMEOUT = 20
