import pytest

from gotify_provider._impl.data_sources.application import ApplicationDataSource
from gotify_provider._impl.exceptions import APIError
from gotify_provider._impl.exceptions import AuthenticationError
from gotify_provider._impl.exceptions import ConfigurationError
from gotify_provider._impl.exceptions import NotFoundError
from gotify_provider._impl.models import ApplicationLookup

from tests.util import APPLICATION_URL
from tests.util import AUTH_HEADERS
from tests.util import remote_application


def test_lookup(httpx_mock, data_source):
    httpx_mock.add_response(
        url=APPLICATION_URL,
        method="GET",
        match_headers=AUTH_HEADERS,
        json=[
            remote_application(1, "backups", description="nightly jobs", defaultPriority=2),
            remote_application(7, "alerts", description="pager", defaultPriority=9, token="AzxC"),
        ],
    )

    result = data_source.read(ApplicationLookup(id="7"))

    assert result.to_state() == {
        "id": "7",
        "name": "alerts",
        "description": "pager",
        "priority": "9",
        "token": "AzxC",
    }


def test_lookup_last_match_wins(httpx_mock, data_source):
    httpx_mock.add_response(
        url=APPLICATION_URL,
        method="GET",
        json=[
            remote_application(3, "first", token="first-token"),
            remote_application(5, "other"),
            remote_application(3, "second", token="second-token", defaultPriority=4),
        ],
    )

    result = data_source.read(ApplicationLookup(id="3"))

    assert result.name == "second"
    assert result.token == "second-token"
    assert result.priority == "4"


def test_lookup_ignores_filter_inputs(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", json=[remote_application(2, "real-name")])

    result = data_source.read(ApplicationLookup(id="2", name="wrong-name", priority="99"))

    assert result.name == "real-name"
    assert result.priority == "0"


def test_lookup_not_found(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", json=[remote_application(1, "backups")])
    config = ApplicationLookup(id="42", name="keep")

    with pytest.raises(NotFoundError) as exc_info:
        data_source.read(config)

    assert exc_info.value.detail == "No application found with this id"
    assert exc_info.value.resource_id == "42"
    assert config.to_state() == {"id": "42", "name": "keep"}


def test_lookup_empty_collection(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", json=[])

    with pytest.raises(NotFoundError):
        data_source.read(ApplicationLookup(id="1"))


def test_lookup_compares_stringified_ids(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", json=[remote_application(10, "ten")])

    with pytest.raises(NotFoundError):
        data_source.read(ApplicationLookup(id="010"))


def test_lookup_401(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", status_code=401)

    with pytest.raises(AuthenticationError):
        data_source.read(ApplicationLookup(id="1"))


def test_lookup_malformed_listing(httpx_mock, data_source):
    httpx_mock.add_response(url=APPLICATION_URL, method="GET", json=[{"name": "no id"}])

    with pytest.raises(APIError):
        data_source.read(ApplicationLookup(id="1"))


def test_unconfigured_data_source():
    with pytest.raises(ConfigurationError):
        ApplicationDataSource().read(ApplicationLookup(id="1"))


def test_configure_rejects_unexpected_provider_data():
    with pytest.raises(ConfigurationError) as exc_info:
        ApplicationDataSource().configure("not provider data")

    assert exc_info.value.summary == "Unexpected Data Source Configure Type"


def test_schema():
    schema = ApplicationDataSource().schema()

    assert schema.attribute("id").required
    assert schema.attribute("token").computed
    assert schema.attribute("name").optional
