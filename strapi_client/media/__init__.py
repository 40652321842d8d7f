"""
Media library functionality.

This module provides access to files stored by the Strapi upload plugin.
"""

from strapi_client.media.files import MediaManager

__all__ = [
    "MediaManager",
]
