"""
Configuration management for Strapi client.

This module provides utilities for loading configuration from
environment variables or other sources.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class StrapiConfig:
    """
    Configuration class for Strapi client settings.

    This class manages configuration for the Strapi client, supporting
    both direct parameter initialization and environment variable loading.
    It validates that the base URL is present.

    Attributes:
        base_url: Base URL of the Strapi instance.
        token: Optional bearer token (e.g., an API token) installed on the client.
        timeout: Request timeout in seconds (default: 30).

    Examples:
        >>> # From environment variables
        >>> config = StrapiConfig.from_env()
        >>>
        >>> # Direct initialization
        >>> config = StrapiConfig(
        ...     base_url="http://localhost:1337",
        ...     token="api-token",
        ...     timeout=60
        ... )
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 30,
    ):
        """
        Initialize configuration.

        Parameters can be provided directly or will be loaded from environment
        variables if not provided. Direct parameters take precedence over
        environment variables.

        Args:
            base_url: Strapi base URL. If None, loads from STRAPI_BASE_URL env var.
            token: Bearer token. If None, loads from STRAPI_TOKEN env var.
            timeout: Request timeout in seconds. Defaults to 30.

        Raises:
            ValueError: If the base URL is missing after checking both
                       parameters and environment variables.
        """
        self.base_url = base_url or os.getenv("STRAPI_BASE_URL")
        self.token = token or os.getenv("STRAPI_TOKEN")
        self.timeout = timeout

        self._validate()

    def _validate(self) -> None:
        if not self.base_url:
            raise ValueError(
                "Strapi base URL is required. "
                "Set STRAPI_BASE_URL environment variable or pass base_url parameter."
            )

    @classmethod
    def from_env(cls, timeout: int = 30) -> "StrapiConfig":
        """
        Create configuration from environment variables.

        Required environment variables:
        - STRAPI_BASE_URL: Base URL of the Strapi instance

        Optional environment variables:
        - STRAPI_TOKEN: Bearer token installed on clients built from this config

        Args:
            timeout: Request timeout in seconds. Defaults to 30.

        Raises:
            ValueError: If STRAPI_BASE_URL is missing.
        """
        return cls(timeout=timeout)
