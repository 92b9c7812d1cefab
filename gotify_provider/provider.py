from gotify_provider._impl.client import GotifyClient
from gotify_provider._impl.data_sources.application import ApplicationDataSource
from gotify_provider._impl.framework import Attribute
from gotify_provider._impl.framework import DataSource
from gotify_provider._impl.framework import Provider
from gotify_provider._impl.framework import ProviderData
from gotify_provider._impl.framework import Resource
from gotify_provider._impl.framework import Schema
from gotify_provider._impl.provider import GotifyProvider
from gotify_provider._impl.provider import new
from gotify_provider._impl.resources.application import ApplicationResource

__all__ = [
    "ApplicationDataSource",
    "ApplicationResource",
    "Attribute",
    "DataSource",
    "GotifyClient",
    "GotifyProvider",
    "Provider",
    "ProviderData",
    "Resource",
    "Schema",
    "new",
]
