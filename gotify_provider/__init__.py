from gotify_provider._impl.config.constants import VERSION

__version__ = VERSION
