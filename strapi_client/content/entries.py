"""
Content entries module for Strapi collections.

This module provides CRUD operations over any collection exposed by the
Strapi REST API. Collection names are not validated locally; an unknown
collection surfaces as a server error.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:
    from strapi_client.core.client import StrapiClient

EntryId = Union[str, int]


class EntryManager:
    """
    Manager for entries of Strapi collections.

    Entry payloads and query parameters are passed through untouched:
    filters, sorting and pagination use the server's own query syntax
    (e.g., ``{"_sort": "title:asc", "_limit": 10}``).

    Attributes:
        client: StrapiClient instance for making API requests.

    Examples:
        >>> entries = EntryManager(client)
        >>> articles = entries.get_entries("articles", {"_sort": "published_at:desc"})
        >>> article = entries.create_entry("articles", {"title": "Hello"})
        >>> entries.update_entry("articles", article["id"], {"title": "Hello again"})
    """

    def __init__(self, client: "StrapiClient"):
        self.client = client

    def get_entries(self, collection_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List entries of a collection.

        Args:
            collection_name: Collection name as used in the URL (e.g., "articles").
            params: Optional filter/sort/pagination query parameters.

        Returns:
            The server's response body, typically a list of entries.
        """
        return self.client.request("get", f"/{collection_name}", self._params(params))

    def get_entry_count(self, collection_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Count the entries of a collection matching optional filters."""
        return self.client.request("get", f"/{collection_name}/count", self._params(params))

    def get_entry(self, collection_name: str, entry_id: EntryId) -> Any:
        return self.client.request("get", f"/{collection_name}/{entry_id}")

    def create_entry(self, collection_name: str, data: Any) -> Any:
        """
        Create an entry.

        Returns:
            The created entry as returned by the server.
        """
        return self.client.request("post", f"/{collection_name}", {"data": data})

    def update_entry(self, collection_name: str, entry_id: EntryId, data: Any) -> Any:
        """
        Update an entry.

        Returns:
            The updated entry as returned by the server.
        """
        return self.client.request("put", f"/{collection_name}/{entry_id}", {"data": data})

    def delete_entry(self, collection_name: str, entry_id: EntryId) -> Any:
        return self.client.request("delete", f"/{collection_name}/{entry_id}")

    @staticmethod
    def _params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return {"params": params} if params is not None else None
