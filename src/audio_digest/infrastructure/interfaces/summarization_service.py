"""Abstract interface for summarization service operations."""

from abc import ABC, abstractmethod


class SummarizationService(ABC):
    """Abstract base class for text summarization backends."""

    @abstractmethod
    def summarize(self, transcript: str) -> str:
        """
        Condenses a transcript into a summary.

        Args:
            transcript: Non-empty transcript text.

        Returns:
            The summary in the configured style and language.

        Raises:
            InvalidRequestError: If the transcript is empty.
            SummarizationError: If the provider call fails.
        """
        pass
