"""Direct-upload transcription and summarization service."""

__version__ = "0.1.0"
