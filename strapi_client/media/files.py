"""
Media library module for the Strapi upload plugin.

This module provides search, listing, lookup and upload of files
stored in the Strapi media library.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:
    from strapi_client.core.client import StrapiClient


class MediaManager:
    """
    Manager for files of the Strapi media library.

    Attributes:
        UPLOAD_PATH: Path of the upload plugin endpoints.
        client: StrapiClient instance for making API requests.

    Examples:
        >>> media = MediaManager(client)
        >>> images = media.search_files("logo")
        >>> with open("logo.png", "rb") as fh:
        ...     uploaded = media.upload({"ref": "article"}, files={"files": fh})
    """

    UPLOAD_PATH = "/upload"

    def __init__(self, client: "StrapiClient"):
        self.client = client

    def search_files(self, query: str) -> Any:
        """Search files by name."""
        return self.client.request("get", f"{self.UPLOAD_PATH}/search/{query}")

    def get_files(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List files.

        Args:
            params: Optional filter/sort/pagination query parameters
                    (e.g., ``{"_sort": "size:asc"}``).
        """
        config = {"params": params} if params is not None else None
        return self.client.request("get", f"{self.UPLOAD_PATH}/files", config)

    def get_file(self, file_id: Union[str, int]) -> Any:
        return self.client.request("get", f"{self.UPLOAD_PATH}/files/{file_id}")

    def upload(self, data: Any, files: Optional[Dict[str, Any]] = None) -> Any:
        """
        Upload files to the media library.

        Args:
            data: Request body, forwarded verbatim. With ``files`` this holds
                  the accompanying form fields (e.g., ``ref``, ``refId``, ``field``).
            files: Optional multipart files mapping, in the format accepted by
                   ``requests`` (e.g., ``{"files": open("logo.png", "rb")}``).

        Returns:
            The server's response body, typically the list of created files.
        """
        config: Dict[str, Any] = {"data": data}
        if files is not None:
            config["files"] = files
        return self.client.request("post", self.UPLOAD_PATH, config)
