"""MinIO implementation of the StorageClient interface."""

from collections.abc import Iterable
from datetime import timedelta

from minio import Minio

from audio_digest.exceptions import FetchError, ObjectTooLargeError
from audio_digest.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()

CHUNK_SIZE = 64 * 1024


def buffer_stream(chunks: Iterable[bytes], max_bytes: int, object_name: str) -> bytes:
    """
    Accumulates a streamed object body into one contiguous buffer.

    Raises:
        ObjectTooLargeError: As soon as the running total exceeds max_bytes.
    """
    buffer = bytearray()
    for chunk in chunks:
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise ObjectTooLargeError(object_name, max_bytes)
    return bytes(buffer)


class MinioStorageClient(StorageClient):
    """Handles presigning and object reads against an S3-compatible bucket."""

    def __init__(self, client: Minio, bucket_name: str, presigner):
        """
        Initializes the storage client.

        Args:
            client: MinIO client used for object reads.
            bucket_name: Bucket holding uploaded objects.
            presigner: boto3 S3 client used to sign upload URLs. MinIO's
                presigner signs only the host header, so it cannot bind the
                upload's Content-Type.
        """
        self._client = client
        self._bucket_name = bucket_name
        self._presigner = presigner

    def presign_upload(
        self,
        object_name: str,
        content_type: str,
        expires: timedelta,
    ) -> str:
        url = self._presigner.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": self._bucket_name,
                "Key": object_name,
                "ContentType": content_type,
            },
            ExpiresIn=int(expires.total_seconds()),
        )
        logger.info(
            "Presigned upload URL created",
            extra={
                "bucket_name": self._bucket_name,
                "object_name": object_name,
                "content_type": content_type,
            },
        )
        return url

    def download(self, object_name: str, max_bytes: int) -> bytes:
        try:
            response = self._client.get_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
            )
            try:
                data = buffer_stream(
                    response.stream(CHUNK_SIZE), max_bytes, object_name
                )
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded from storage",
                extra={
                    "bucket_name": self._bucket_name,
                    "object_name": object_name,
                    "size": len(data),
                },
            )
            return data
        except ObjectTooLargeError:
            logger.warning(
                "Object exceeds size limit",
                extra={"object_name": object_name, "max_bytes": max_bytes},
            )
            raise
        except Exception as e:
            logger.exception(
                "Storage download failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise FetchError(object_name, e) from e
