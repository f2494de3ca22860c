"""Reads uploaded objects back from storage into memory."""

from audio_digest.exceptions import InvalidRequestError
from audio_digest.infrastructure.interfaces import StorageClient


class ObjectFetcher:
    """Fetches whole objects by key, bounded by a size ceiling."""

    def __init__(self, storage: StorageClient, max_bytes: int):
        self._storage = storage
        self._max_bytes = max_bytes

    def fetch(self, object_name: str) -> bytes:
        """
        Returns the full content of an uploaded object.

        Raises:
            InvalidRequestError: If object_name is empty.
            FetchError: If the object cannot be read.
            ObjectTooLargeError: If the object exceeds the size ceiling.
        """
        if not object_name:
            raise InvalidRequestError("Missing file key in request body.")
        return self._storage.download(object_name, max_bytes=self._max_bytes)
