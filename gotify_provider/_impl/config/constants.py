PROVIDER_TYPE_NAME = "gotify"
APPLICATION_TYPE_SUFFIX = "_application"

AUTH_HEADER = "X-Gotify-Key"
APPLICATION_PATH = "application"

DEFAULT_DESCRIPTION = "Description not configured"
DEFAULT_PRIORITY = "1"

VERSION = "0.0.1"
