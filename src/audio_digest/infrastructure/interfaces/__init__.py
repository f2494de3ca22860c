"""Infrastructure interface exports."""

from .storage import StorageClient
from .summarization_service import SummarizationService
from .transcription_service import TranscriptionService

__all__ = ["StorageClient", "SummarizationService", "TranscriptionService"]
