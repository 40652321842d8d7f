"""
Tests for the HTTP transport binding.

These tests stub requests.Session.request and verify URL resolution,
default headers, body encoding and status handling.
"""

import threading
from unittest import mock

import pytest
import requests

from strapi_client import StrapiClient, Transport


@pytest.fixture
def transport():
    transport = Transport("http://strapi-host/api/", timeout=15)
    yield transport
    transport.close()


@pytest.fixture
def session_request(transport, make_response):
    with mock.patch.object(
        transport.session, "request", return_value=make_response({"ok": True})
    ) as stub:
        yield stub


class TestTransport:
    """Test suite for Transport."""

    def test_defaults(self, transport: Transport):
        """Test base URL normalization and default headers."""
        assert transport.base_url == "http://strapi-host/api"
        assert transport.timeout == 15
        assert transport.headers == {"Accept": "application/json"}

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("/articles", "http://strapi-host/api/articles"),
            ("articles/1", "http://strapi-host/api/articles/1"),
            ("https://cdn.example.com/file.png", "https://cdn.example.com/file.png"),
        ],
    )
    def test_build_url(self, transport: Transport, url: str, expected: str):
        """Test that relative paths keep the base path and absolute URLs pass through."""
        assert transport.build_url(url) == expected

    def test_request_json_body(self, transport, session_request):
        """Test that dict bodies are sent as JSON with default headers and timeout."""
        response = transport.request("post", "/articles", data={"title": "Hello"})

        session_request.assert_called_once_with(
            "POST",
            "http://strapi-host/api/articles",
            params=None,
            headers={"Accept": "application/json"},
            timeout=15,
            json={"title": "Hello"},
        )
        assert response.json() == {"ok": True}

    def test_request_raw_body(self, transport, session_request):
        """Test that non-JSON bodies are forwarded as raw data."""
        transport.request("post", "/upload", data="foo")

        assert session_request.call_args.kwargs["data"] == "foo"
        assert "json" not in session_request.call_args.kwargs

    def test_request_form_fields_with_files(self, transport, session_request):
        """Test that form fields accompanying files are sent as form data."""
        files = {"files": ("logo.png", b"\x89PNG")}

        transport.request("post", "/upload", data={"ref": "article"}, files=files)

        kwargs = session_request.call_args.kwargs
        assert kwargs["data"] == {"ref": "article"}
        assert kwargs["files"] is files
        assert "json" not in kwargs

    def test_request_params_and_headers(self, transport, session_request):
        """Test that per-call headers override defaults and params pass through."""
        transport.set_header("Authorization", "Bearer foo")

        transport.request(
            "get",
            "/articles",
            params={"_limit": 5},
            headers={"Accept": "text/plain", "X-Trace": "1"},
            timeout=5,
        )

        kwargs = session_request.call_args.kwargs
        assert kwargs["params"] == {"_limit": 5}
        assert kwargs["headers"] == {
            "Accept": "text/plain",
            "Authorization": "Bearer foo",
            "X-Trace": "1",
        }
        assert kwargs["timeout"] == 5

    def test_per_call_headers_do_not_persist(self, transport, session_request):
        """Test that per-call headers leave the defaults untouched."""
        transport.request("get", "/articles", headers={"X-Trace": "1"})

        assert transport.headers == {"Accept": "application/json"}

    def test_request_error_status_raises(self, transport, session_request, make_response):
        """Test that error statuses raise HTTPError carrying the response."""
        session_request.return_value = make_response({"message": "Forbidden"}, status_code=403)

        with pytest.raises(requests.HTTPError) as exc_info:
            transport.request("get", "/articles")

        assert exc_info.value.response.status_code == 403

    def test_remove_missing_header(self, transport: Transport):
        """Test that removing an absent header is a no-op."""
        transport.remove_header("Authorization")

        assert transport.get_header("Authorization") is None

    def test_context_manager_closes_session(self):
        """Test that leaving the with-block closes the session."""
        transport = Transport("http://strapi-host")

        with mock.patch.object(transport.session, "close") as session_close:
            with transport as entered:
                assert entered is transport

        session_close.assert_called_once_with()

    def test_header_names_case_insensitive(self, transport: Transport):
        """Test that header lookups ignore case."""
        transport.set_header("Authorization", "Bearer foo")

        assert transport.get_header("authorization") == "Bearer foo"


class TestHeaderSnapshot:
    """Test suite for the dispatch-time header snapshot."""

    def test_token_read_at_dispatch(self, make_response):
        """Test that a token installed between requests only affects the later one."""
        client = StrapiClient("http://strapi-host")
        with mock.patch.object(
            client.transport.session, "request", return_value=make_response({})
        ) as session_request:
            client.request("get", "/first")
            client.set_token("foo")
            client.request("get", "/second")
            client.clear_token()
            client.request("get", "/third")

        sent = [call.kwargs["headers"].get("Authorization") for call in session_request.call_args_list]
        assert sent == [None, "Bearer foo", None]

    def test_concurrent_mutation(self):
        """Test that concurrent set/clear leaves exactly one consistent value."""
        transport = Transport("http://strapi-host")
        observed = []

        def worker(token: str):
            for _ in range(200):
                transport.set_header("Authorization", f"Bearer {token}")
                observed.append(transport.headers.get("Authorization"))
                transport.remove_header("Authorization")

        threads = [threading.Thread(target=worker, args=(str(i),)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        valid = {None} | {f"Bearer {i}" for i in range(4)}
        assert len(observed) == 800
        assert set(observed) <= valid
        assert "Authorization" not in transport.headers
