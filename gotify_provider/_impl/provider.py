"""The Gotify provider: configuration validation and handler registry."""

import logging
from typing import Any
from typing import Callable
from typing import List
from typing import Mapping
from typing import Union

from gotify_provider._impl.client import GotifyClient
from gotify_provider._impl.config.constants import PROVIDER_TYPE_NAME
from gotify_provider._impl.data_sources.application import new_application_data_source
from gotify_provider._impl.exceptions import GotifyError
from gotify_provider._impl.exceptions import ValidationError
from gotify_provider._impl.framework import Attribute
from gotify_provider._impl.framework import DataSource
from gotify_provider._impl.framework import Provider
from gotify_provider._impl.framework import ProviderData
from gotify_provider._impl.framework import Resource
from gotify_provider._impl.framework import Schema
from gotify_provider._impl.models import ConnectionSettings
from gotify_provider._impl.models import ProviderConfig
from gotify_provider._impl.resources.application import new_application_resource

log = logging.getLogger(__name__)


class GotifyProvider(Provider):
    """
    Entry point for the host environment.

    `configure` is called once per run. It probes the Gotify instance and, on
    success, returns the ProviderData every resource and data source receives
    through their own `configure`.
    """

    def __init__(self, version: str) -> None:
        # "dev" when run locally, "test" under the test suite, the package version on release
        self.version = version

    @property
    def type_name(self) -> str:
        return PROVIDER_TYPE_NAME

    def schema(self) -> Schema:
        return Schema(
            description="Manage applications of a Gotify instance",
            attributes=[
                Attribute(name="token", description="Token of Gotify Client", required=True),
                Attribute(name="url", description="URL for Gotify Instance", required=True),
            ],
        )

    def configure(self, config: Union[ProviderConfig, Mapping[str, Any]]) -> ProviderData:
        """
        Validate the connection settings against the Gotify instance.

        Args:
            config: The provider block, with `url` and `token`

        Returns:
            The validated settings and the shared client

        Raises:
            ValidationError: If url or token is missing
            ConnectivityError: If the instance cannot be reached
            AuthenticationError: If the token is rejected
            APIError: If the probe gets any other non-200 response
        """
        if not isinstance(config, ProviderConfig):
            config = ProviderConfig.model_validate(dict(config))

        if not config.url:
            raise ValidationError("The url attribute is required", summary="Missing Gotify URL")
        if not config.token:
            raise ValidationError("The token attribute is required", summary="Missing Gotify token")

        settings = ConnectionSettings(url=config.url, token=config.token)
        client = GotifyClient(settings)

        try:
            client.probe()
        except GotifyError as e:
            log.error(f"{e.summary}: {e.detail}")
            client.close()
            raise

        log.debug(f"Configured provider for {settings.url}")
        return ProviderData(settings=settings, client=client)

    def resources(self) -> List[Callable[[], Resource]]:
        return [new_application_resource]

    def data_sources(self) -> List[Callable[[], DataSource]]:
        return [new_application_data_source]


def new(version: str) -> Callable[[], GotifyProvider]:
    def factory() -> GotifyProvider:
        return GotifyProvider(version)

    return factory
