"""The gotify_application data source."""

import logging
from typing import Optional

from gotify_provider._impl.config.constants import APPLICATION_PATH
from gotify_provider._impl.config.constants import APPLICATION_TYPE_SUFFIX
from gotify_provider._impl.exceptions import NotFoundError
from gotify_provider._impl.exceptions import ValidationError
from gotify_provider._impl.framework import Attribute
from gotify_provider._impl.framework import DataSource
from gotify_provider._impl.framework import Schema
from gotify_provider._impl.models import ApplicationLookup
from gotify_provider._impl.models import RemoteApplication

log = logging.getLogger(__name__)


class ApplicationDataSource(DataSource):
    """Looks up an existing Gotify application by id."""

    def type_name(self, provider_type_name: str) -> str:
        return provider_type_name + APPLICATION_TYPE_SUFFIX

    def schema(self) -> Schema:
        return Schema(
            description="Application data source",
            attributes=[
                Attribute(
                    name="name",
                    description="Name of the gotify application",
                    optional=True,
                ),
                Attribute(
                    name="description",
                    description="Description of the gotify application",
                    optional=True,
                ),
                Attribute(
                    name="priority",
                    description="Priority of the application",
                    optional=True,
                ),
                Attribute(
                    name="id",
                    description="Application identifier",
                    required=True,
                ),
                Attribute(
                    name="token",
                    description="Application token",
                    computed=True,
                ),
            ],
        )

    def read(self, config: ApplicationLookup) -> ApplicationLookup:
        """
        Fetch every application and pick the one with the requested id.

        Only the id takes part in matching; name, description and priority
        given as input are overwritten by the remote values.

        Args:
            config: The lookup input

        Returns:
            The lookup populated from the matching application

        Raises:
            NotFoundError: If no application has this id
        """
        if not config.id:
            raise ValidationError("The id attribute is required", summary="Missing application id")

        response = self.client.request("GET", APPLICATION_PATH)
        applications = self.client.decode_list(response, RemoteApplication)

        log.info(f"Searched id: {config.id}")

        match: Optional[RemoteApplication] = None
        for application in applications:
            # No break: a later entry with the same id replaces an earlier one
            if str(application.id) == config.id:
                match = application

        if match is None:
            raise NotFoundError(config.id)

        return ApplicationLookup(
            id=str(match.id),
            name=match.name,
            description=match.description,
            priority=str(match.default_priority),
            token=match.token,
        )


def new_application_data_source() -> DataSource:
    return ApplicationDataSource()
