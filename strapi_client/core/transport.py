"""
HTTP transport binding for the Strapi API.

This module wraps a ``requests.Session`` together with the default
configuration shared by every request: the base URL, the default
timeout and the default headers (including the bearer token once one
is installed).
"""

import logging
import re
import threading
from typing import Any, Dict, Optional

import requests
from requests.structures import CaseInsensitiveDict

logger = logging.getLogger(__name__)

_ABSOLUTE_URL = re.compile(r"^[a-z][a-z\d+\-.]*://", re.IGNORECASE)


def response_body(response: requests.Response) -> Any:
    """
    Extract the body of a response.

    Returns:
        None for an empty body, the parsed JSON document when the body is
        JSON, otherwise the body as text.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class Transport:
    """
    Holds the HTTP session and the defaults applied to every request.

    The default headers are the only mutable state shared between calls.
    They are guarded by a lock so that a request always sees one
    consistent header set, read at the moment it is dispatched.

    Attributes:
        DEFAULT_TIMEOUT: Default request timeout in seconds (30).
        base_url: Base URL every relative path is resolved against.
        timeout: Timeout applied when a request does not specify one.

    Examples:
        >>> transport = Transport("http://localhost:1337")
        >>> transport.set_header("Authorization", "Bearer abc")
        >>> response = transport.request("get", "/articles")
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Base URL of the Strapi instance (e.g., http://localhost:1337)
            timeout: Default request timeout in seconds
            session: Optional pre-configured session (useful for dependency injection)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._headers = CaseInsensitiveDict({"Accept": "application/json"})
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """The underlying requests session."""
        return self._session

    @property
    def headers(self) -> Dict[str, str]:
        """Snapshot of the default headers."""
        with self._lock:
            return dict(self._headers)

    def get_header(self, name: str) -> Optional[str]:
        with self._lock:
            return self._headers.get(name)

    def set_header(self, name: str, value: str) -> None:
        """Install a default header, replacing any previous value."""
        with self._lock:
            self._headers[name] = value

    def remove_header(self, name: str) -> None:
        """Remove a default header entirely. Missing headers are ignored."""
        with self._lock:
            self._headers.pop(name, None)

    def build_url(self, url: str) -> str:
        """
        Resolve a request path against the base URL.

        Absolute URLs are returned unchanged. Relative paths are appended
        to the base URL, keeping any path the base URL already has.
        """
        if _ABSOLUTE_URL.match(url):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        **options: Any,
    ) -> requests.Response:
        """
        Send a single HTTP request.

        Args:
            method: HTTP method (e.g., "get", "post").
            url: Path relative to the base URL, or an absolute URL.
            data: Optional request body. Dicts and lists are sent as JSON,
                  anything else (string, bytes, file, form fields when
                  ``files`` is given) is forwarded as the raw body.
            params: Optional query parameters.
            headers: Optional headers overriding the defaults for this call.
            **options: Any other ``requests`` option, forwarded verbatim.

        Returns:
            requests.Response for a successful (2xx) request.

        Raises:
            requests.HTTPError: If the server answered with an error status.
                The response is available on the exception.
            requests.RequestException: If no response was received.
        """
        with self._lock:
            request_headers = self._headers.copy()
        if headers:
            request_headers.update(headers)

        options.setdefault("timeout", self.timeout)

        if isinstance(data, (dict, list)) and "files" not in options:
            options["json"] = data
        elif data is not None:
            options["data"] = data

        full_url = self.build_url(url)
        logger.debug("%s %s", method.upper(), full_url)

        response = self._session.request(
            method.upper(),
            full_url,
            params=params,
            headers=request_headers,
            **options,
        )
        response.raise_for_status()
        return response

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
