"""
Core functionality for Strapi API client.

This module contains the core components:
- HTTP transport and request dispatching
- Authentication and bearer token management
- Configuration management
- Exception definitions
"""

from strapi_client.core.auth import StrapiAuthenticator
from strapi_client.core.client import StrapiClient
from strapi_client.core.config import StrapiConfig
from strapi_client.core.exceptions import (
    StrapiAPIError,
    StrapiClientError,
    StrapiNetworkError,
)
from strapi_client.core.transport import Transport

__all__ = [
    "StrapiClient",
    "StrapiAuthenticator",
    "StrapiConfig",
    "Transport",
    "StrapiAPIError",
    "StrapiClientError",
    "StrapiNetworkError",
]
