"""Exceptions raised by the Gotify provider."""

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class Diagnostic:
    """An error as reported back to the host environment."""

    summary: str
    detail: str
    severity: str = "error"


class GotifyError(Exception):
    """Base class for all Gotify provider exceptions."""

    summary = "Gotify provider error"

    def __init__(self, message: str, summary: Optional[str] = None):
        if summary is not None:
            self.summary = summary
        self.detail = message
        super().__init__(message)

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(summary=self.summary, detail=self.detail)


class ValidationError(GotifyError):
    """Raised when input is malformed, before any request is sent."""

    summary = "Invalid configuration"


class ConfigurationError(GotifyError):
    """Raised when a handler is used without valid provider data."""

    summary = "Provider not configured"


class ConnectivityError(GotifyError):
    """Raised when the Gotify instance cannot be reached."""

    summary = "API Error when contacting Gotify instance"


class APIError(GotifyError):
    """Raised when the Gotify instance answers with an unexpected status code."""

    summary = "API Error when contacting Gotify instance"

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[httpx.Response] = None,
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response = response
        self.body = body
        super().__init__(message)


class AuthenticationError(APIError):
    """Raised when the Gotify instance rejects the client token."""

    summary = "Not Allowed"

    def __init__(
        self,
        message: str = "Bad token (?)",
        response: Optional[httpx.Response] = None,
        body: Optional[str] = None,
    ):
        super().__init__(401, message, response, body)


class NotFoundError(GotifyError):
    """Raised when a lookup finds no application with the requested id."""

    summary = "API Error"

    def __init__(self, resource_id: str, message: str = "No application found with this id"):
        self.resource_id = resource_id
        super().__init__(message)
