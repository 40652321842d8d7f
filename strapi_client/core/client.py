"""
Main Strapi API client.

This module provides the request dispatcher every operation goes through,
and the public surface combining authentication, content entries and the
media library.
"""

import logging
from typing import Any, Dict, Optional, Union

import requests

from strapi_client.content.entries import EntryManager
from strapi_client.core.auth import StrapiAuthenticator
from strapi_client.core.config import StrapiConfig
from strapi_client.core.exceptions import StrapiAPIError, StrapiNetworkError
from strapi_client.core.transport import Transport, response_body
from strapi_client.media.files import MediaManager

logger = logging.getLogger(__name__)


def _error_message(body: Any, default: str) -> str:
    """
    Extract a human readable message from a server error payload.

    Understands a plain ``message`` string, the nested validation shape
    ``{"message": [{"messages": [{"message": ...}]}]}`` and the
    ``{"error": {"message": ...}}`` shape.
    """
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
        if isinstance(message, list) and message:
            first = message[0]
            if isinstance(first, dict):
                messages = first.get("messages")
                if isinstance(messages, list) and messages and isinstance(messages[0], dict):
                    nested = messages[0].get("message")
                    if isinstance(nested, str) and nested:
                        return nested
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str) and error:
            return error
    elif isinstance(body, str) and body:
        return body
    return default


class StrapiClient:
    """
    High-level client for the Strapi REST API.

    Every public operation performs exactly one HTTP request through
    ``request()``, returns the response body only, and raises
    StrapiAPIError on failure. Nothing is retried or cached.

    The client is composed of:
    - transport: the HTTP session and its default headers
    - auth: register/login flows and bearer token management
    - entries: CRUD on collection entries
    - media: the media library

    Examples:
        >>> from strapi_client import StrapiClient
        >>>
        >>> client = StrapiClient("http://localhost:1337")
        >>> client.login("user@example.com", "secret")
        >>>
        >>> articles = client.get_entries("articles", {"_sort": "title:asc"})
        >>> client.create_entry("articles", {"title": "Hello"})
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = Transport.DEFAULT_TIMEOUT,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the Strapi client.

        Args:
            base_url: Base URL of the Strapi instance
            timeout: Request timeout in seconds
            transport: Optional pre-configured transport instance
                      (useful for dependency injection). When given, its own
                      base URL and timeout are used and the base_url and
                      timeout arguments are ignored.
        """
        self.transport = transport or Transport(base_url, timeout=timeout)
        self.auth = StrapiAuthenticator(self)
        self.entries = EntryManager(self)
        self.media = MediaManager(self)

    @classmethod
    def from_config(cls, config: StrapiConfig) -> "StrapiClient":
        """
        Create a client from a StrapiConfig, installing its token if any.

        Examples:
            >>> client = StrapiClient.from_config(StrapiConfig.from_env())
        """
        client = cls(config.base_url, timeout=config.timeout)
        if config.token:
            client.set_token(config.token)
        return client

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    def request(
        self,
        method: str,
        path: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a request to the Strapi API.

        The request is described by ``method`` and ``path`` merged with the
        entries of ``config`` (``data``, ``params``, ``headers`` or any other
        transport option), and sent once.

        Args:
            method: HTTP method, e.g. "get", "post", "put", "delete".
            path: Path relative to the base URL (e.g., "/articles").
            config: Optional extra request options merged into the request.
                    Accepted keys are ``data``, ``params``, ``headers`` and the
                    keyword arguments of ``requests.Session.request`` (``files``,
                    ``timeout``, ``cookies``, ``auth``, ``allow_redirects``, ...).

        Returns:
            The response body; status and headers are discarded.

        Raises:
            StrapiAPIError: If the server answered with an error. ``body``
                holds the server's error payload unchanged.
            StrapiNetworkError: If no response was received.
            TypeError: If ``config`` holds a key that is not a request option.
                This is a programming error and is not wrapped.

        Examples:
            >>> client.request("get", "/articles", {"params": {"_limit": 5}})
            >>> client.request("post", "/articles", {"data": {"title": "Hello"}})
        """
        descriptor: Dict[str, Any] = {"method": method, "url": path}
        if config:
            descriptor.update(config)

        try:
            response = self.transport.request(**descriptor)
        except requests.exceptions.RequestException as e:
            # HTTPError, TooManyRedirects and others may still carry the response
            if e.response is None:
                raise self._network_error(method, path, e) from e
            body = response_body(e.response)
            status_code = e.response.status_code
            logger.warning("%s %s failed with status %s", method.upper(), path, status_code)
            raise StrapiAPIError(
                _error_message(body, str(e)),
                status_code=status_code,
                body=body,
            ) from e

        return response_body(response)

    @staticmethod
    def _network_error(method: str, path: str, error: Exception) -> StrapiNetworkError:
        logger.warning("%s %s failed: %s", method.upper(), path, error)
        return StrapiNetworkError(f"Network error: {error}")

    # Authentication

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        """Register a new user. See StrapiAuthenticator.register."""
        return self.auth.register(username, email, password)

    def login(self, identifier: str, password: str) -> Dict[str, Any]:
        """Log in with an identifier and password. See StrapiAuthenticator.login."""
        return self.auth.login(identifier, password)

    def forgot_password(self, email: str, url: str) -> Any:
        return self.auth.forgot_password(email, url)

    def reset_password(self, code: str, password: str, password_confirmation: str) -> Any:
        return self.auth.reset_password(code, password, password_confirmation)

    def get_provider_authentication_url(self, provider: str) -> str:
        return self.auth.get_provider_authentication_url(provider)

    def authenticate_provider(
        self, provider: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return self.auth.authenticate_provider(provider, params)

    def set_token(self, token: str) -> None:
        """Install a bearer token for all subsequent requests."""
        self.auth.set_token(token)

    def clear_token(self) -> None:
        """Remove the bearer token from all subsequent requests."""
        self.auth.clear_token()

    def get_token(self) -> Optional[str]:
        return self.auth.get_token()

    # Content entries

    def get_entries(self, collection_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """List entries of a collection. See EntryManager.get_entries."""
        return self.entries.get_entries(collection_name, params)

    def get_entry_count(self, collection_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.entries.get_entry_count(collection_name, params)

    def get_entry(self, collection_name: str, entry_id: Union[str, int]) -> Any:
        return self.entries.get_entry(collection_name, entry_id)

    def create_entry(self, collection_name: str, data: Any) -> Any:
        return self.entries.create_entry(collection_name, data)

    def update_entry(self, collection_name: str, entry_id: Union[str, int], data: Any) -> Any:
        return self.entries.update_entry(collection_name, entry_id, data)

    def delete_entry(self, collection_name: str, entry_id: Union[str, int]) -> Any:
        return self.entries.delete_entry(collection_name, entry_id)

    # Media library

    def search_files(self, query: str) -> Any:
        return self.media.search_files(query)

    def get_files(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.media.get_files(params)

    def get_file(self, file_id: Union[str, int]) -> Any:
        return self.media.get_file(file_id)

    def upload(self, data: Any, files: Optional[Dict[str, Any]] = None) -> Any:
        """Upload files to the media library. See MediaManager.upload."""
        return self.media.upload(data, files)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "StrapiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
