"""Typed state records and wire bodies for the Gotify application API."""

import re
from typing import Any
from typing import Dict
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from gotify_provider._impl.config.constants import DEFAULT_DESCRIPTION
from gotify_provider._impl.config.constants import DEFAULT_PRIORITY
from gotify_provider._impl.exceptions import ValidationError

# Optional sign followed by ASCII digits, nothing else
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_priority(priority: Optional[str]) -> int:
    """
    Parse a string-encoded priority into an integer.

    Args:
        priority: The priority as configured, e.g. "3"

    Returns:
        The integer priority

    Raises:
        ValidationError: If the value is not a plain base-10 integer that fits in 64 bits
    """
    if priority is None or not _INTEGER_PATTERN.fullmatch(priority):
        raise ValidationError(
            f"Invalid priority value: {priority!r}",
            summary="Priority cannot be parsed as Int",
        )
    value = int(priority)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValidationError(
            f"Priority value out of range: {priority!r}",
            summary="Priority cannot be parsed as Int",
        )
    return value


class ConnectionSettings(BaseModel):
    """Validated connection settings shared by every operation."""

    url: str
    token: str

    model_config = ConfigDict(frozen=True)

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ProviderConfig(BaseModel):
    """Provider-level configuration as supplied by the host."""

    url: Optional[str] = None
    token: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class ApplicationRecord(BaseModel):
    """Desired or persisted state of a managed application."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    token: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("id", "priority", mode="before")
    @classmethod
    def stringify_numbers(cls, v: Any) -> Any:
        # YAML and JSON state files may hold these as bare integers
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def with_defaults(self) -> "ApplicationRecord":
        """Fill the attributes the schema gives a default value."""
        return self.model_copy(
            update={
                "description": DEFAULT_DESCRIPTION if self.description is None else self.description,
                "priority": DEFAULT_PRIORITY if self.priority is None else self.priority,
            }
        )

    def to_state(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ApplicationRequest(BaseModel):
    """Body of the create and update calls."""

    default_priority: int = Field(alias="defaultPriority")
    description: str
    name: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, record: ApplicationRecord) -> "ApplicationRequest":
        if record.name is None:
            raise ValidationError("The name attribute is required", summary="Missing application name")
        return cls(
            default_priority=parse_priority(record.priority),
            description=record.description if record.description is not None else DEFAULT_DESCRIPTION,
            name=record.name,
        )


class CreateApplicationResponse(BaseModel):
    """Body returned by a successful create call."""

    id: int
    token: str
    internal: bool = False

    model_config = ConfigDict(extra="ignore")


class RemoteApplication(BaseModel):
    """One entry of the application listing."""

    id: int
    name: str = ""
    description: str = ""
    default_priority: int = Field(default=0, alias="defaultPriority")
    token: str = ""
    internal: bool = False
    image: str = ""
    last_used: Optional[Any] = Field(default=None, alias="lastUsed")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApplicationLookup(BaseModel):
    """Input and output of the application data source."""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    token: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("id", "priority", mode="before")
    @classmethod
    def stringify_numbers(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_state(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
