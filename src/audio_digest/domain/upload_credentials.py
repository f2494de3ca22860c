"""Issues presigned credentials for direct client-to-storage uploads."""

from datetime import timedelta

from audio_digest.exceptions import CredentialIssuanceError, InvalidRequestError
from audio_digest.infrastructure.interfaces import StorageClient
from audio_digest.logging import setup_logging

from .key_deriver import derive_storage_key
from .models import UploadCredential

logger = setup_logging()


class UploadCredentialIssuer:
    """Mints storage keys and signs one-hour PUT URLs for them."""

    def __init__(self, storage: StorageClient, expiry_seconds: int = 3600):
        self._storage = storage
        self._expiry_seconds = expiry_seconds

    def issue(self, filename: str | None, content_type: str | None) -> UploadCredential:
        """
        Issues an upload credential for a new object.

        Args:
            filename: Client-side name of the file being uploaded.
            content_type: MIME type the client will send with the PUT.

        Returns:
            UploadCredential with the presigned URL and the derived key.

        Raises:
            InvalidRequestError: If filename or content_type is missing.
            CredentialIssuanceError: If the storage backend cannot sign the URL.
        """
        if not filename or not content_type:
            raise InvalidRequestError("Missing filename or contentType query parameters.")

        key = derive_storage_key(filename)

        try:
            url = self._storage.presign_upload(
                object_name=key.object_name,
                content_type=content_type,
                expires=timedelta(seconds=self._expiry_seconds),
            )
        except Exception as e:
            logger.exception(
                "Upload URL signing failed",
                extra={"object_name": key.object_name},
            )
            raise CredentialIssuanceError(key.object_name, e) from e

        logger.info(
            "Upload URL issued",
            extra={
                "object_name": key.object_name,
                "content_type": content_type,
                "expires_in": self._expiry_seconds,
            },
        )
        return UploadCredential(
            url=url,
            key=key,
            content_type=content_type,
            expires_in=self._expiry_seconds,
        )
