import json
import logging
from typing import Any
from typing import Dict
from typing import Optional
from typing import Type
from typing import TypeVar

import click
import pydantic
import yaml

from gotify_provider._impl.config.constants import VERSION
from gotify_provider._impl.data_sources.application import ApplicationDataSource
from gotify_provider._impl.exceptions import GotifyError
from gotify_provider._impl.framework import ProviderData
from gotify_provider._impl.models import ApplicationLookup
from gotify_provider._impl.models import ApplicationRecord
from gotify_provider._impl.provider import GotifyProvider
from gotify_provider._impl.resources.application import ApplicationResource
from gotify_provider._impl.util import GotifyEnvVar

T = TypeVar("T", bound=pydantic.BaseModel)


def read_record(path: str) -> Dict[str, Any]:
    """Reads a YAML (or JSON) record from the specified path."""
    with open(path, "r") as file:
        try:
            data = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise click.ClickException(f"Could not parse {path}: {e}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a mapping of attributes")
    return data


def load_record(path: str, model_class: Type[T]) -> T:
    try:
        return model_class.model_validate(read_record(path))
    except pydantic.ValidationError as e:
        raise click.ClickException(f"Invalid attributes in {path}: {e}")


def echo_state(state: Dict[str, Any]) -> None:
    click.echo(json.dumps(state, indent=2, sort_keys=True))


def fail(error: GotifyError) -> click.ClickException:
    diagnostic = error.to_diagnostic()
    return click.ClickException(f"{diagnostic.summary}: {diagnostic.detail}")


def configure(ctx: click.Context) -> ProviderData:
    provider: GotifyProvider = ctx.obj["provider"]
    try:
        provider_data = provider.configure({"url": ctx.obj["url"], "token": ctx.obj["token"]})
    except GotifyError as e:
        raise fail(e)
    ctx.call_on_close(provider_data.client.close)
    return provider_data


def configured_resource(ctx: click.Context) -> ApplicationResource:
    resource = ApplicationResource()
    resource.configure(configure(ctx))
    return resource


@click.group()
@click.option("--url", envvar=GotifyEnvVar.URL.value, help="URL for Gotify Instance")
@click.option("--token", envvar=GotifyEnvVar.TOKEN.value, help="Token of Gotify Client")
@click.option(
    "--log-level",
    envvar=GotifyEnvVar.LOG_LEVEL.value,
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
@click.version_option(VERSION)
@click.pass_context
def cli(ctx: click.Context, url: Optional[str], token: Optional[str], log_level: str) -> None:
    """Manage Gotify applications."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj.update({"url": url, "token": token, "provider": GotifyProvider(VERSION)})


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check the URL and token against the Gotify instance."""
    configure(ctx)
    click.echo("Configuration valid")


@cli.command()
@click.pass_context
def schema(ctx: click.Context) -> None:
    """Print the provider, resource and data source schemas."""
    provider: GotifyProvider = ctx.obj["provider"]
    output: Dict[str, Any] = {"provider": provider.schema().to_dict(), "resources": {}, "data_sources": {}}
    for new_resource in provider.resources():
        resource = new_resource()
        output["resources"][resource.type_name(provider.type_name)] = resource.schema().to_dict()
    for new_data_source in provider.data_sources():
        data_source = new_data_source()
        output["data_sources"][data_source.type_name(provider.type_name)] = data_source.schema().to_dict()
    echo_state(output)


@cli.group()
def application() -> None:
    """Manage the lifecycle of an application."""
    pass


@application.command()
@click.option("--config", "config_path", required=True, type=click.Path(exists=True), help="Desired attributes")
@click.pass_context
def create(ctx: click.Context, config_path: str) -> None:
    """Create an application and print its state."""
    plan = load_record(config_path, ApplicationRecord)
    resource = configured_resource(ctx)
    try:
        state = resource.create(plan)
    except GotifyError as e:
        raise fail(e)
    echo_state(state.to_state())


@application.command()
@click.option("--state", "state_path", required=True, type=click.Path(exists=True), help="Persisted state")
@click.pass_context
def read(ctx: click.Context, state_path: str) -> None:
    """Print the persisted state of an application."""
    state = load_record(state_path, ApplicationRecord)
    resource = configured_resource(ctx)
    echo_state(resource.read(state).to_state())


@application.command()
@click.option("--config", "config_path", required=True, type=click.Path(exists=True), help="Desired attributes")
@click.pass_context
def update(ctx: click.Context, config_path: str) -> None:
    """Update an existing application and print its state."""
    plan = load_record(config_path, ApplicationRecord)
    resource = configured_resource(ctx)
    try:
        state = resource.update(plan)
    except GotifyError as e:
        raise fail(e)
    echo_state(state.to_state())


@application.command()
@click.option("--state", "state_path", required=True, type=click.Path(exists=True), help="Persisted state")
@click.pass_context
def delete(ctx: click.Context, state_path: str) -> None:
    """Delete an application."""
    state = load_record(state_path, ApplicationRecord)
    resource = configured_resource(ctx)
    try:
        resource.delete(state)
    except GotifyError as e:
        raise fail(e)
    click.echo(f"Deleted application {state.id}")


@application.command(name="import")
@click.argument("application_id")
@click.pass_context
def import_(ctx: click.Context, application_id: str) -> None:
    """Start tracking an existing application by id."""
    resource = configured_resource(ctx)
    try:
        state = resource.import_state(application_id)
    except GotifyError as e:
        raise fail(e)
    echo_state(state.to_state())


@cli.command()
@click.argument("application_id")
@click.pass_context
def lookup(ctx: click.Context, application_id: str) -> None:
    """Print the attributes of an existing application."""
    data_source = ApplicationDataSource()
    data_source.configure(configure(ctx))
    try:
        result = data_source.read(ApplicationLookup(id=application_id))
    except GotifyError as e:
        raise fail(e)
    echo_state(result.to_state())


def main() -> None:
    cli()
