"""Capability interfaces implemented by the provider, its resources and its data sources."""

import abc
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional

from gotify_provider._impl.client import GotifyClient
from gotify_provider._impl.exceptions import ConfigurationError
from gotify_provider._impl.models import ConnectionSettings


@dataclass(frozen=True)
class Attribute:
    name: str
    description: str
    required: bool = False
    optional: bool = False
    computed: bool = False
    default: Optional[str] = None
    use_state_for_unknown: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "required": self.required,
            "optional": self.optional,
            "computed": self.computed,
            "default": self.default,
            "use_state_for_unknown": self.use_state_for_unknown,
        }


@dataclass(frozen=True)
class Schema:
    description: str
    attributes: List[Attribute] = field(default_factory=list)

    def attribute(self, name: str) -> Attribute:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "attributes": {attr.name: attr.to_dict() for attr in self.attributes},
        }


@dataclass(frozen=True)
class ProviderData:
    """What a configured provider hands to each resource and data source."""

    settings: ConnectionSettings
    client: GotifyClient


class _Configurable(abc.ABC):
    """Shared configure step for resources and data sources."""

    kind = "Resource"

    def __init__(self) -> None:
        self._provider_data: Optional[ProviderData] = None

    def configure(self, provider_data: Optional[Any]) -> None:
        """
        Receive the validated client from the provider.

        Args:
            provider_data: The value returned by the provider's configure step,
                or None when the provider has not been configured yet

        Raises:
            ConfigurationError: If provider_data is not a ProviderData
        """
        if provider_data is None:
            return

        if not isinstance(provider_data, ProviderData):
            raise ConfigurationError(
                f"Expected ProviderData, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
                summary=f"Unexpected {self.kind} Configure Type",
            )

        self._provider_data = provider_data

    @property
    def client(self) -> GotifyClient:
        if self._provider_data is None:
            raise ConfigurationError(f"The provider must be configured before using this {self.kind.lower()}")
        return self._provider_data.client

    @abc.abstractmethod
    def type_name(self, provider_type_name: str) -> str:
        pass

    @abc.abstractmethod
    def schema(self) -> Schema:
        pass


class Resource(_Configurable):
    """A managed resource kind with a full lifecycle."""

    kind = "Resource"

    @abc.abstractmethod
    def create(self, plan: Any) -> Any:
        pass

    @abc.abstractmethod
    def read(self, state: Any) -> Any:
        pass

    @abc.abstractmethod
    def update(self, plan: Any) -> Any:
        pass

    @abc.abstractmethod
    def delete(self, state: Any) -> None:
        pass

    @abc.abstractmethod
    def import_state(self, resource_id: str) -> Any:
        pass


class DataSource(_Configurable):
    """A read-only lookup kind."""

    kind = "Data Source"

    @abc.abstractmethod
    def read(self, config: Any) -> Any:
        pass


class Provider(abc.ABC):
    """The entry point the host environment configures once per run."""

    @abc.abstractmethod
    def schema(self) -> Schema:
        pass

    @abc.abstractmethod
    def configure(self, config: Any) -> ProviderData:
        pass

    @abc.abstractmethod
    def resources(self) -> List[Callable[[], Resource]]:
        pass

    @abc.abstractmethod
    def data_sources(self) -> List[Callable[[], DataSource]]:
        pass
