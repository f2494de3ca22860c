"""Custom exceptions for the audio-digest service."""

from enum import Enum


class Stage(str, Enum):
    """A step of the processing pipeline."""

    FETCH = "fetch"
    TRANSCRIBE = "transcribe"
    SUMMARIZE = "summarize"


class InvalidRequestError(Exception):
    """Raised when caller input is missing or malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CredentialIssuanceError(Exception):
    """Raised when the storage backend cannot sign an upload URL."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__("Failed to generate upload URL")


class StageError(Exception):
    """Base class for failures tagged with the pipeline stage that raised them."""

    stage: Stage

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class FetchError(StageError):
    """Raised when an uploaded object cannot be read from storage."""

    stage = Stage.FETCH

    def __init__(
        self,
        object_name: str,
        cause: Exception | None = None,
        message: str | None = None,
    ):
        self.object_name = object_name
        super().__init__(
            message or f"Failed to fetch '{object_name}' from storage", cause
        )


class ObjectTooLargeError(FetchError):
    """Raised when an object exceeds the configured buffering ceiling."""

    def __init__(self, object_name: str, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(
            object_name,
            message=f"Object '{object_name}' exceeds the {max_bytes} byte limit",
        )


class TranscriptionError(StageError):
    """Raised when audio transcription fails."""

    stage = Stage.TRANSCRIBE

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(f"Failed to transcribe audio file '{file_name}'", cause)


class SummarizationError(StageError):
    """Raised when transcript summarization fails."""

    stage = Stage.SUMMARIZE

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)
