from gotify_provider._impl.exceptions import APIError
from gotify_provider._impl.exceptions import AuthenticationError
from gotify_provider._impl.exceptions import ConfigurationError
from gotify_provider._impl.exceptions import ConnectivityError
from gotify_provider._impl.exceptions import Diagnostic
from gotify_provider._impl.exceptions import GotifyError
from gotify_provider._impl.exceptions import NotFoundError
from gotify_provider._impl.exceptions import ValidationError

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "ConnectivityError",
    "Diagnostic",
    "GotifyError",
    "NotFoundError",
    "ValidationError",
]
