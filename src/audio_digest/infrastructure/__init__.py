"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_summarizer import GeminiSummarizer
from .minio_storage import MinioStorageClient, buffer_stream

__all__ = [
    "AssemblyAITranscriber",
    "GeminiSummarizer",
    "MinioStorageClient",
    "buffer_stream",
]
