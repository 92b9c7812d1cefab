import pytest

from gotify_provider._impl.exceptions import ValidationError
from gotify_provider._impl.models import ApplicationLookup
from gotify_provider._impl.models import ApplicationRecord
from gotify_provider._impl.models import ApplicationRequest
from gotify_provider._impl.models import ConnectionSettings
from gotify_provider._impl.models import RemoteApplication
from gotify_provider._impl.models import parse_priority
from gotify_provider._impl.utils.serialization import serialize_model


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1", 1),
        ("3", 3),
        ("0", 0),
        ("-2", -2),
        ("+4", 4),
        ("10", 10),
    ],
)
def test_parse_priority(value, expected):
    assert parse_priority(value) == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "", " 3", "3 ", "3.0", "1_0", "0x10", "99999999999999999999999", "-9223372036854775809", None],
)
def test_parse_priority_rejects_non_integers(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_priority(value)

    assert exc_info.value.summary == "Priority cannot be parsed as Int"


def test_with_defaults_fills_missing_attributes():
    record = ApplicationRecord(name="app1").with_defaults()

    assert record.description == "Description not configured"
    assert record.priority == "1"
    assert record.name == "app1"


def test_with_defaults_keeps_configured_attributes():
    record = ApplicationRecord(name="app1", description="", priority="7").with_defaults()

    assert record.description == ""
    assert record.priority == "7"


def test_record_accepts_numeric_id_and_priority():
    record = ApplicationRecord.model_validate({"id": 4, "name": "app1", "priority": 3})

    assert record.id == "4"
    assert record.priority == "3"


def test_record_to_state_drops_unknown_attributes():
    assert ApplicationRecord(id="9").to_state() == {"id": "9"}


def test_request_body_uses_api_field_names():
    body = ApplicationRequest.from_record(ApplicationRecord(name="app1", description="d", priority="3"))

    assert serialize_model(body) == {"defaultPriority": 3, "description": "d", "name": "app1"}


def test_request_requires_name():
    with pytest.raises(ValidationError):
        ApplicationRequest.from_record(ApplicationRecord(priority="3"))


def test_connection_settings_strip_trailing_slash():
    settings = ConnectionSettings(url="https://push.example.com/", token="t")

    assert settings.url == "https://push.example.com"


def test_remote_application_ignores_unknown_fields():
    application = RemoteApplication.model_validate(
        {
            "id": 1,
            "name": "app",
            "defaultPriority": 5,
            "lastUsed": "2024-01-01T00:00:00Z",
            "sortKey": "a0",
        }
    )

    assert application.default_priority == 5
    assert application.last_used == "2024-01-01T00:00:00Z"
    assert application.token == ""


def test_lookup_accepts_numeric_id():
    assert ApplicationLookup.model_validate({"id": 12}).id == "12"


def test_parse_priority_accepts_64_bit_bounds():
    assert parse_priority("9223372036854775807") == 2**63 - 1
    assert parse_priority("-9223372036854775808") == -(2**63)


def test_request_accepts_empty_name():
    body = ApplicationRequest.from_record(ApplicationRecord(name="", priority="1"))

    assert body.name == ""
