"""HTTP client shared by every Gotify operation."""

import json
import logging
import urllib.parse
from typing import Any
from typing import List
from typing import Optional
from typing import Type
from typing import TypeVar

import httpx
from pydantic import BaseModel

from gotify_provider._impl.config.constants import APPLICATION_PATH
from gotify_provider._impl.config.constants import AUTH_HEADER
from gotify_provider._impl.exceptions import APIError
from gotify_provider._impl.exceptions import AuthenticationError
from gotify_provider._impl.exceptions import ConnectivityError
from gotify_provider._impl.exceptions import ValidationError
from gotify_provider._impl.models import ConnectionSettings
from gotify_provider._impl.utils.serialization import deserialize_model
from gotify_provider._impl.utils.serialization import deserialize_model_list
from gotify_provider._impl.utils.serialization import serialize_model

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def build_path(*parts: str) -> str:
    """
    Build a URL path from parts, encoding each one.

    Args:
        *parts: Path parts to join

    Returns:
        The joined path
    """
    return "/".join(urllib.parse.quote(part, safe="") for part in parts if part)


class GotifyClient:
    """Authenticated access to the Gotify REST API."""

    def __init__(self, settings: ConnectionSettings, http_client: Optional[httpx.Client] = None) -> None:
        """
        Initialize the client with connection settings

        Args:
            settings: Base URL and client token of the Gotify instance
            http_client: Optional pre-built httpx client, mainly for tests
        """
        self.settings = settings

        try:
            self._headers = httpx.Headers(
                {
                    "Content-Type": "application/json",
                    AUTH_HEADER: settings.token,
                }
            )
        except UnicodeEncodeError as e:
            raise ValidationError(f"The token cannot be sent in an HTTP header: {e}", summary="Invalid Gotify token")

        # One client for every operation so connections are pooled; headers go with each request
        self._client = http_client or httpx.Client()

    def __enter__(self) -> "GotifyClient":
        return self

    def __exit__(
        self, exc_type: Optional[Type[BaseException]], exc_value: Optional[BaseException], traceback: Any
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client"""
        self._client.close()

    def url_for(self, *segments: str) -> str:
        return f"{self.settings.url}/{build_path(*segments)}"

    def _send(self, method: str, url: str, data: Optional[BaseModel] = None) -> httpx.Response:
        json_data = serialize_model(data) if data is not None else None

        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"Request: {method} {url}")
            if json_data:
                log.debug(f"Request Data: {json.dumps(json_data, indent=2)}")

        try:
            response = self._client.request(method=method, url=url, json=json_data, headers=self._headers)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            log.error(str(e))
            raise ValidationError(str(e), summary="Can't send request to Gotify")
        except httpx.RequestError as e:
            # Network errors, timeouts, etc.
            log.error(str(e))
            raise ConnectivityError(str(e))

        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"Response Status: {response.status_code}")
            log.debug(f"Response Body (text): {response.text}")

        return response

    def _handle_response_error(self, response: httpx.Response) -> None:
        """
        Map a non-200 response to an exception.

        Raises:
            AuthenticationError: For 401 Unauthorized
            APIError: For any other status code
        """
        body = response.text

        if response.status_code == 401:
            raise AuthenticationError(f"Bad token (?) : {body}", response, body)

        raise APIError(
            response.status_code,
            f"Received a {response.status_code} response code : {body}",
            response,
            body,
        )

    def request(self, method: str, *segments: str, data: Optional[BaseModel] = None) -> httpx.Response:
        """
        Send one request and fail on anything but 200 OK.

        Args:
            method: HTTP method
            *segments: Path segments below the base URL
            data: Optional request body

        Returns:
            The successful response

        Raises:
            ConnectivityError: If the instance cannot be reached
            AuthenticationError: If the token is rejected
            APIError: For any other non-200 status
        """
        response = self._send(method, self.url_for(*segments), data)
        if response.status_code != 200:
            self._handle_response_error(response)
        return response

    def probe(self) -> None:
        """
        Check that the instance is reachable and accepts the token.

        Raises:
            ConnectivityError: If the instance cannot be reached
            AuthenticationError: On 401
            APIError: On any other non-200 status
        """
        try:
            response = self._send("GET", self.url_for(APPLICATION_PATH))
        except ConnectivityError as e:
            raise ConnectivityError(e.detail, summary="Can't contact Gotify Instance")

        if response.status_code == 401:
            raise AuthenticationError("Bad token (?)", response, response.text)
        if response.status_code != 200:
            raise APIError(response.status_code, "Received a non-200 response code", response, response.text)

    def decode(self, response: httpx.Response, model_class: Type[T]) -> T:
        try:
            return deserialize_model(response.json(), model_class)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            log.error(str(e))
            raise APIError(response.status_code, "Failed to decode response body", response, response.text)

    def decode_list(self, response: httpx.Response, model_class: Type[T]) -> List[T]:
        try:
            return deserialize_model_list(response.json(), model_class)
        except ValueError as e:
            log.error(str(e))
            raise APIError(response.status_code, f"Failed to decode response body: {e}", response, response.text)
