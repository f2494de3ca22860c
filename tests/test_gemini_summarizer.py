from unittest.mock import Mock

import pytest

from audio_digest.config import DEFAULT_SUMMARY_PROMPT
from audio_digest.exceptions import InvalidRequestError, SummarizationError
from audio_digest.infrastructure import GeminiSummarizer


def _summarizer(client):
    return GeminiSummarizer(client, "gemini-test", DEFAULT_SUMMARY_PROMPT, 0.5)


def test_summarize_sends_transcript_with_fixed_instruction():
    client = Mock()
    client.models.generate_content.return_value = Mock(text="要約")

    summary = _summarizer(client).summarize("we agreed to ship on friday")

    assert summary == "要約"
    client.models.generate_content.assert_called_once_with(
        model="gemini-test",
        contents="we agreed to ship on friday",
        config={"system_instruction": DEFAULT_SUMMARY_PROMPT, "temperature": 0.5},
    )


@pytest.mark.parametrize("transcript", ["", "   \n"])
def test_empty_transcript_is_rejected(transcript):
    client = Mock()

    with pytest.raises(InvalidRequestError):
        _summarizer(client).summarize(transcript)

    client.models.generate_content.assert_not_called()


def test_provider_failure_raises_summarization_error():
    client = Mock()
    client.models.generate_content.side_effect = RuntimeError("quota exceeded")

    with pytest.raises(SummarizationError) as exc_info:
        _summarizer(client).summarize("text")

    assert exc_info.value.stage.value == "summarize"
    assert "quota exceeded" in exc_info.value.message


def test_empty_provider_response_raises_summarization_error():
    client = Mock()
    client.models.generate_content.return_value = Mock(text="")

    with pytest.raises(SummarizationError):
        _summarizer(client).summarize("text")
