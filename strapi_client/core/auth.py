"""
Authentication module for the Strapi users & permissions API.

This module handles the local authentication flows (register, login,
password recovery), third-party provider callbacks, and the bearer
token installed on the transport for all subsequent requests.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from strapi_client.core.client import StrapiClient

logger = logging.getLogger(__name__)


class StrapiAuthenticator:
    """
    Handles authentication against a Strapi instance.

    There is no token until a successful register/login/provider callback
    or an explicit ``set_token()``. The token then stays installed as the
    default ``Authorization: Bearer <token>`` header until it is replaced
    by another ``set_token()`` or removed by ``clear_token()``. There is
    no expiry tracking and no automatic refresh.

    Attributes:
        AUTHORIZATION_HEADER: Name of the header carrying the token.
        TOKEN_FIELD: Field of the authentication response holding the token.

    Examples:
        >>> authenticator = client.auth
        >>> result = authenticator.login("user@example.com", "secret")
        >>> print(result["user"]["username"])
        >>> authenticator.get_token() == result["jwt"]
        True
    """

    AUTHORIZATION_HEADER = "Authorization"
    TOKEN_FIELD = "jwt"

    def __init__(self, client: "StrapiClient"):
        """
        Initialize the authenticator.

        Args:
            client: StrapiClient used to issue requests and owning the transport.
        """
        self.client = client

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        """
        Register a new user and install the issued token.

        Args:
            username: Username of the new account.
            email: Email address of the new account.
            password: Password of the new account.

        Returns:
            The server's authentication result, unchanged
            (typically ``{"jwt": ..., "user": {...}}``).

        Raises:
            StrapiAPIError: If registration fails.
        """
        authentication = self.client.request(
            "post",
            "/auth/local/register",
            {"data": {"username": username, "email": email, "password": password}},
        )
        self._install_token(authentication)
        return authentication

    def login(self, identifier: str, password: str) -> Dict[str, Any]:
        """
        Log in with an identifier (username or email) and password.

        Args:
            identifier: Username or email address.
            password: Account password.

        Returns:
            The server's authentication result, unchanged
            (typically ``{"jwt": ..., "user": {...}}``).

        Raises:
            StrapiAPIError: If the credentials are rejected.
        """
        authentication = self.client.request(
            "post",
            "/auth/local",
            {"data": {"identifier": identifier, "password": password}},
        )
        self._install_token(authentication)
        return authentication

    def forgot_password(self, email: str, url: str) -> Any:
        """
        Ask the server to send a password reset email.

        Args:
            email: Email address of the account.
            url: Callback URL the reset link in the email points to.
        """
        return self.client.request(
            "post",
            "/auth/forgot-password",
            {"data": {"email": email, "url": url}},
        )

    def reset_password(self, code: str, password: str, password_confirmation: str) -> Any:
        """
        Reset a password with the code received by email.

        Args:
            code: Reset code from the password reset email.
            password: New password.
            password_confirmation: New password, repeated.
        """
        return self.client.request(
            "post",
            "/auth/reset-password",
            {
                "data": {
                    "code": code,
                    "password": password,
                    "passwordConfirmation": password_confirmation,
                }
            },
        )

    def get_provider_authentication_url(self, provider: str) -> str:
        """
        Get the URL a browser should visit to authenticate with a provider.

        No request is made; the URL is built from the client's base URL.

        Examples:
            >>> client.auth.get_provider_authentication_url("github")
            'http://localhost:1337/connect/github'
        """
        return f"{self.client.transport.base_url}/connect/{provider}"

    def authenticate_provider(
        self, provider: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Complete a provider authentication and install the issued token.

        Args:
            provider: Provider name (e.g., "github", "google").
            params: Query parameters received by the provider callback,
                    typically ``{"access_token": ...}``.

        Returns:
            The server's authentication result, unchanged.
        """
        config = {"params": params} if params is not None else None
        authentication = self.client.request("get", f"/auth/{provider}/callback", config)
        self._install_token(authentication)
        return authentication

    def set_token(self, token: str) -> None:
        """
        Install a bearer token for all subsequent requests.

        Replaces any previously installed token.
        """
        self.client.transport.set_header(self.AUTHORIZATION_HEADER, f"Bearer {token}")
        logger.debug("Bearer token installed")

    def clear_token(self) -> None:
        """
        Remove the bearer token.

        The Authorization header is removed from the defaults entirely, so
        subsequent requests are sent unauthenticated.
        """
        self.client.transport.remove_header(self.AUTHORIZATION_HEADER)
        logger.debug("Bearer token cleared")

    def get_token(self) -> Optional[str]:
        """
        Get the installed bearer token.

        Returns:
            The token string, or None if no token is installed.
        """
        value = self.client.transport.get_header(self.AUTHORIZATION_HEADER)
        if value is None:
            return None
        return value[len("Bearer "):] if value.startswith("Bearer ") else value

    def _install_token(self, authentication: Any) -> None:
        if isinstance(authentication, dict) and authentication.get(self.TOKEN_FIELD):
            self.set_token(authentication[self.TOKEN_FIELD])
