"""
Custom exceptions for Strapi client operations.

This module defines the exception hierarchy raised by the Strapi client
library. Every failed API call surfaces as a StrapiAPIError, carrying the
server's error payload when the server sent one.
"""

from typing import Any, Optional


class StrapiClientError(Exception):
    """
    Base exception for all Strapi client errors.

    All exceptions raised by the Strapi client inherit from this class,
    allowing for broad exception handling if needed.

    Examples:
        >>> try:
        ...     client.get_entries("articles")
        ... except StrapiClientError as e:
        ...     print(f"Strapi error: {e}")
    """

    pass


class StrapiAPIError(StrapiClientError):
    """
    Raised when an API request fails.

    When the server answered with an error payload, ``body`` holds that
    payload unchanged and ``message`` is taken from it. Otherwise ``body``
    is None and ``message`` describes the transport failure.

    Attributes:
        message: Error message describing the failure.
        status_code: HTTP status code of the failed request, if available.
        body: Error payload sent by the server, if available.

    Examples:
        >>> try:
        ...     client.get_entry("articles", "missing-id")
        ... except StrapiAPIError as e:
        ...     print(f"API error {e.status_code}: {e.message}")
        ...     if e.body:
        ...         print(f"Server payload: {e.body}")
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        """
        Initialize API error.

        Args:
            message: Error message describing the API failure.
            status_code: Optional HTTP status code from the failed request.
            body: Optional error payload from the failed request.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class StrapiNetworkError(StrapiAPIError):
    """
    Raised when no response was received at all.

    Covers DNS and connection failures, timeouts and aborted requests.
    The underlying ``requests`` exception is chained as ``__cause__``.
    """

    pass
