"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, filename_hint: str) -> str:
        """
        Transcribes audio data into plain text.

        Args:
            audio_data: Raw audio file bytes.
            filename_hint: Original file name, used for format detection.

        Returns:
            The transcript. Empty when no speech was detected.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
