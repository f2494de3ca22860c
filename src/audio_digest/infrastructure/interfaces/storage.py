"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from datetime import timedelta


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def presign_upload(
        self,
        object_name: str,
        content_type: str,
        expires: timedelta,
    ) -> str:
        """
        Signs a URL that lets a client PUT one object directly.

        Args:
            object_name: The destination path/name in storage.
            content_type: MIME type the client will upload with.
            expires: Lifetime of the signed URL.

        Returns:
            The presigned URL.
        """
        pass

    @abstractmethod
    def download(self, object_name: str, max_bytes: int) -> bytes:
        """
        Downloads an object into a single in-memory buffer.

        Args:
            object_name: The object path/name in storage.
            max_bytes: Size ceiling for the buffered content.

        Returns:
            The object contents as bytes.

        Raises:
            FetchError: If the download fails.
            ObjectTooLargeError: If the object exceeds max_bytes.
        """
        pass
