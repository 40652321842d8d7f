"""
Content API functionality.

This module provides CRUD operations on Strapi collection entries.
"""

from strapi_client.content.entries import EntryManager

__all__ = [
    "EntryManager",
]
