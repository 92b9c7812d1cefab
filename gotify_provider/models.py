from gotify_provider._impl.models import ApplicationLookup
from gotify_provider._impl.models import ApplicationRecord
from gotify_provider._impl.models import ApplicationRequest
from gotify_provider._impl.models import ConnectionSettings
from gotify_provider._impl.models import CreateApplicationResponse
from gotify_provider._impl.models import ProviderConfig
from gotify_provider._impl.models import RemoteApplication

__all__ = [
    "ApplicationLookup",
    "ApplicationRecord",
    "ApplicationRequest",
    "ConnectionSettings",
    "CreateApplicationResponse",
    "ProviderConfig",
    "RemoteApplication",
]
