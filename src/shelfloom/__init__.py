"""shelfloom: an asynchronous Python client for the BookStack REST API."""

from .constants import __version__

# Import Exceptions
from .exceptions import (
    ApplicationError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    RateLimitedError,
    ShelfloomError,
    TimeoutError,
    TransportError,
)

# Import main client class and its building blocks
from .auth import AuthStrategy, NoAuth, TokenAuth
from .client import BookStackClient
from .config import ShelfloomSettings, get_settings
from .constants import ContentType, ImageType, RolePermissions
from .endpoints import Filter, ListingOptions, SearchOptions, resolve_endpoint
from .interpreter import interpret_response
from .log_config import configure_logging
from .pagination import enumerate_all, enumerate_pages
from .retry import try_call
from .types import ResponseKind
from .variants import VariantFamily
from .version import BookStackVersion

__all__ = [
    "__version__",
    # Core Client
    "BookStackClient",
    "ShelfloomSettings",
    "get_settings",
    "configure_logging",
    # Auth
    "AuthStrategy",
    "NoAuth",
    "TokenAuth",
    # Core Exceptions
    "ShelfloomError",
    "TransportError",
    "TimeoutError",
    "NetworkError",
    "RateLimitedError",
    "ApplicationError",
    "DecodeError",
    "ConfigurationError",
    # Request building and response handling
    "Filter",
    "ListingOptions",
    "SearchOptions",
    "resolve_endpoint",
    "ResponseKind",
    "interpret_response",
    "VariantFamily",
    # Throttling and enumeration
    "try_call",
    "enumerate_all",
    "enumerate_pages",
    # Values
    "BookStackVersion",
    "ContentType",
    "ImageType",
    "RolePermissions",
]
