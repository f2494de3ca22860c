"""AssemblyAI implementation of the TranscriptionService interface."""

import os
import tempfile

import assemblyai as aai

from audio_digest.exceptions import TranscriptionError
from audio_digest.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_data: bytes, filename_hint: str) -> str:
        """
        Transcribes audio data using AssemblyAI.

        Writes audio to a temp file carrying the original extension so the
        provider can detect the format, then returns the plain transcript.
        """
        if not audio_data:
            logger.error("Empty audio payload", extra={"file_name": filename_hint})
            raise TranscriptionError(filename_hint, ValueError("Audio payload is empty"))

        suffix = os.path.splitext(filename_hint)[1]
        try:
            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(audio_data)
                temp_file.flush()

                transcript = self._transcriber.transcribe(temp_file.name)

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(filename_hint, Exception(transcript.error))

            text = transcript.text or ""
            logger.info(
                "Audio transcription successful",
                extra={"file_name": filename_hint, "characters": len(text)},
            )
            return text

        except TranscriptionError:
            logger.error(
                "AssemblyAI rejected audio",
                extra={"file_name": filename_hint},
            )
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed",
                extra={"file_name": filename_hint},
            )
            raise TranscriptionError(filename_hint, e) from e
