"""The gotify_application managed resource."""

import logging
from typing import Optional

from gotify_provider._impl.config.constants import APPLICATION_PATH
from gotify_provider._impl.config.constants import APPLICATION_TYPE_SUFFIX
from gotify_provider._impl.config.constants import DEFAULT_DESCRIPTION
from gotify_provider._impl.config.constants import DEFAULT_PRIORITY
from gotify_provider._impl.exceptions import ValidationError
from gotify_provider._impl.framework import Attribute
from gotify_provider._impl.framework import Resource
from gotify_provider._impl.framework import Schema
from gotify_provider._impl.models import ApplicationRecord
from gotify_provider._impl.models import ApplicationRequest
from gotify_provider._impl.models import CreateApplicationResponse

log = logging.getLogger(__name__)


def _check_id(app_id: Optional[str]) -> str:
    if not app_id:
        raise ValidationError("The id attribute is required", summary="Missing application id")
    # Dot segments would be resolved away and move the request off /application/<id>
    if app_id in (".", ".."):
        raise ValidationError(f"Invalid application id: {app_id!r}", summary="Invalid application id")
    return app_id


def _require_id(record: ApplicationRecord) -> str:
    return _check_id(record.id)


class ApplicationResource(Resource):
    """
    Lifecycle of a Gotify application.

    Every call authenticates with the provider token; the token Gotify hands
    out for the application itself is only ever stored as an output.
    """

    def type_name(self, provider_type_name: str) -> str:
        return provider_type_name + APPLICATION_TYPE_SUFFIX

    def schema(self) -> Schema:
        return Schema(
            description="Application resource for gotify",
            attributes=[
                Attribute(
                    name="name",
                    description="Name of the gotify application you want to create",
                    required=True,
                ),
                Attribute(
                    name="description",
                    description="Description of the gotify application",
                    optional=True,
                    computed=True,
                    default=DEFAULT_DESCRIPTION,
                ),
                Attribute(
                    name="priority",
                    description="Priority of the application",
                    optional=True,
                    computed=True,
                    default=DEFAULT_PRIORITY,
                ),
                Attribute(
                    name="id",
                    description="Application identifier",
                    computed=True,
                    use_state_for_unknown=True,
                ),
                Attribute(
                    name="token",
                    description="Application token",
                    computed=True,
                    use_state_for_unknown=True,
                ),
            ],
        )

    def create(self, plan: ApplicationRecord) -> ApplicationRecord:
        """
        Register a new application.

        Args:
            plan: The desired record, without an id

        Returns:
            The plan with the id and token assigned by Gotify

        Raises:
            ValidationError: If the name is missing or the priority is not an integer
            AuthenticationError: If the provider token is rejected
            APIError: For any other non-200 response
        """
        plan = plan.with_defaults()
        body = ApplicationRequest.from_record(plan)

        response = self.client.request("POST", APPLICATION_PATH, data=body)
        created = self.client.decode(response, CreateApplicationResponse)

        log.info("created a resource")
        return plan.model_copy(update={"id": str(created.id), "token": created.token})

    def read(self, state: ApplicationRecord) -> ApplicationRecord:
        # Prior state is trusted as is; there is no drift detection against Gotify.
        return state

    def update(self, plan: ApplicationRecord) -> ApplicationRecord:
        """
        Push the desired attributes of an existing application.

        The submitted plan becomes the new state; fields Gotify assigns are not re-read.
        """
        plan = plan.with_defaults()
        body = ApplicationRequest.from_record(plan)
        app_id = _require_id(plan)

        self.client.request("PUT", APPLICATION_PATH, app_id, data=body)

        log.info("Updated a resource")
        return plan

    def delete(self, state: ApplicationRecord) -> None:
        app_id = _require_id(state)

        self.client.request("DELETE", APPLICATION_PATH, app_id)

        log.info("Deleted a resource")

    def import_state(self, resource_id: str) -> ApplicationRecord:
        return ApplicationRecord(id=_check_id(resource_id))


def new_application_resource() -> Resource:
    return ApplicationResource()
