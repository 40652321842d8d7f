"""
Pytest configuration and shared fixtures.
"""

import json
from collections.abc import Callable, Generator
from typing import Any
from unittest import mock

import pytest
import requests

from strapi_client import StrapiClient

BASE_URL = "http://strapi-host"


def build_response(body: Any = None, status_code: int = 200) -> requests.Response:
    """Build a requests.Response carrying a JSON body (or no body for None)."""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for fake responses: make_response(body, status_code=200)."""
    return build_response


@pytest.fixture
def strapi() -> Generator[StrapiClient, None, None]:
    """Fresh client for each test, so token state never leaks between tests."""
    client = StrapiClient(BASE_URL)
    yield client
    client.close()


@pytest.fixture
def transport_request(strapi: StrapiClient) -> Generator[mock.MagicMock, None, None]:
    """
    Stub the transport's request method.

    The stub resolves with an empty JSON object by default; tests override
    ``return_value`` or ``side_effect`` as needed.
    """
    with mock.patch.object(
        strapi.transport, "request", return_value=build_response({})
    ) as stub:
        yield stub


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require a running Strapi instance)"
    )
