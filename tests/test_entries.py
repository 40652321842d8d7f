"""
Tests for content entry operations.
"""

import pytest
import requests

from strapi_client import EntryManager, StrapiAPIError


class TestEntries:
    """Test suite for CRUD on collection entries."""

    def test_get_entries(self, strapi, transport_request):
        """Test listing entries with query parameters."""
        strapi.get_entries("user", {"_sort": "email:asc"})

        transport_request.assert_called_once_with(
            method="get",
            url="/user",
            params={"_sort": "email:asc"},
        )

    def test_get_entries_without_params(self, strapi, transport_request):
        """Test that no params key is sent when no query is given."""
        strapi.get_entries("user")

        transport_request.assert_called_once_with(method="get", url="/user")

    def test_get_entry_count(self, strapi, transport_request, make_response):
        """Test counting entries."""
        transport_request.return_value = make_response(3)

        count = strapi.get_entry_count("user", {"confirmed": True})

        transport_request.assert_called_once_with(
            method="get",
            url="/user/count",
            params={"confirmed": True},
        )
        assert count == 3

    def test_get_entry(self, strapi, transport_request, make_response):
        """Test fetching a single entry."""
        transport_request.return_value = make_response({"id": "ID", "email": "foo@bar.com"})

        entry = strapi.get_entry("user", "ID")

        transport_request.assert_called_once_with(method="get", url="/user/ID")
        assert entry == {"id": "ID", "email": "foo@bar.com"}

    def test_create_entry(self, strapi, transport_request):
        """Test creating an entry."""
        strapi.create_entry("user", {"foo": "bar"})

        transport_request.assert_called_once_with(
            method="post",
            url="/user",
            data={"foo": "bar"},
        )

    def test_update_entry(self, strapi, transport_request):
        """Test updating an entry."""
        strapi.update_entry("user", "ID", {"foo": "bar"})

        transport_request.assert_called_once_with(
            method="put",
            url="/user/ID",
            data={"foo": "bar"},
        )

    def test_delete_entry(self, strapi, transport_request):
        """Test deleting an entry sends no body."""
        strapi.delete_entry("user", "ID")

        transport_request.assert_called_once_with(method="delete", url="/user/ID")

    def test_integer_entry_id(self, strapi, transport_request):
        """Test that numeric ids are placed in the path as-is."""
        strapi.get_entry("articles", 42)

        transport_request.assert_called_once_with(method="get", url="/articles/42")

    def test_unknown_collection_surfaces_server_error(
        self, strapi, transport_request, make_response
    ):
        """Test that collection names are not validated locally."""
        transport_request.side_effect = requests.HTTPError(
            response=make_response({"statusCode": 404, "error": "Not Found"}, status_code=404)
        )

        with pytest.raises(StrapiAPIError) as exc_info:
            strapi.get_entries("no-such-collection")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"

    def test_manager_shares_client(self, strapi):
        """Test that the entry manager issues requests through its client."""
        assert isinstance(strapi.entries, EntryManager)
        assert strapi.entries.client is strapi
