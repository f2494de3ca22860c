"""Domain layer exports."""

from .key_deriver import derive_storage_key
from .models import PipelineResult, PipelineState, StorageKey, UploadCredential
from .object_fetcher import ObjectFetcher
from .retry_policy import FailureClassifier, call_with_retry, is_transient_failure
from .upload_credentials import UploadCredentialIssuer

__all__ = [
    "derive_storage_key",
    "PipelineResult",
    "PipelineState",
    "StorageKey",
    "UploadCredential",
    "ObjectFetcher",
    "FailureClassifier",
    "call_with_retry",
    "is_transient_failure",
    "UploadCredentialIssuer",
]
