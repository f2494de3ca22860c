"""Gemini implementation of the SummarizationService interface."""

from google import genai

from audio_digest.exceptions import InvalidRequestError, SummarizationError
from audio_digest.logging import setup_logging

from .interfaces import SummarizationService

logger = setup_logging()


class GeminiSummarizer(SummarizationService):
    """Summarizes transcripts using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        temperature: float,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature

    def summarize(self, transcript: str) -> str:
        if not transcript or not transcript.strip():
            raise InvalidRequestError("Cannot summarize an empty transcript")

        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=transcript,
                config={
                    "system_instruction": self._system_prompt,
                    "temperature": self._temperature,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(f"Gemini summarization failed: {e}", e) from e

        if not response.text:
            logger.error("Gemini returned empty response")
            raise SummarizationError("Gemini returned empty response")

        logger.info(
            "Summary generated",
            extra={"model": self._model_name, "characters": len(response.text)},
        )
        return response.text
