import pytest

from gotify_provider._impl.client import GotifyClient
from gotify_provider._impl.data_sources.application import ApplicationDataSource
from gotify_provider._impl.framework import ProviderData
from gotify_provider._impl.models import ConnectionSettings
from gotify_provider._impl.resources.application import ApplicationResource
from gotify_provider._impl.util import GotifyEnvVar

from tests.util import BASE_URL
from tests.util import TOKEN


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    for var in GotifyEnvVar:
        monkeypatch.delenv(var.value, raising=False)
    yield


@pytest.fixture
def provider_data():
    settings = ConnectionSettings(url=BASE_URL, token=TOKEN)
    client = GotifyClient(settings)
    yield ProviderData(settings=settings, client=client)
    client.close()


@pytest.fixture
def resource(provider_data):
    resource = ApplicationResource()
    resource.configure(provider_data)
    return resource


@pytest.fixture
def data_source(provider_data):
    data_source = ApplicationDataSource()
    data_source.configure(provider_data)
    return data_source
