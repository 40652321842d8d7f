"""
Strapi API Client Library.

A Python client for the REST API of a Strapi headless CMS: user
authentication, bearer token handling, CRUD on content collections and
the media library.

Every operation performs exactly one HTTP request and either returns the
response body or raises StrapiAPIError. There is no retry, caching or
automatic token refresh.

Main Components:
    - StrapiClient: Main API client exposing every operation
    - StrapiAuthenticator: Register/login flows and token management
    - EntryManager: CRUD on collection entries
    - MediaManager: Media library search, listing and upload
    - StrapiConfig: Configuration management with environment variable support
    - Custom exceptions for detailed error handling

Quick Start:
    >>> from strapi_client import StrapiClient
    >>>
    >>> client = StrapiClient("http://localhost:1337")
    >>>
    >>> # Authenticate; the token is used by every following request
    >>> client.login("user@example.com", "secret")
    >>>
    >>> # Work with content
    >>> articles = client.get_entries("articles", {"_sort": "title:asc"})
    >>> client.update_entry("articles", articles[0]["id"], {"title": "Renamed"})
"""

# Core functionality
from strapi_client.core import (
    StrapiClient,
    StrapiAuthenticator,
    StrapiConfig,
    Transport,
    StrapiAPIError,
    StrapiClientError,
    StrapiNetworkError,
)

# Content and media functionality
from strapi_client.content import EntryManager
from strapi_client.media import MediaManager

__all__ = [
    "StrapiClient",
    "StrapiAuthenticator",
    "StrapiConfig",
    "Transport",
    "EntryManager",
    "MediaManager",
    "StrapiAPIError",
    "StrapiClientError",
    "StrapiNetworkError",
]

__version__ = "1.0.0"
