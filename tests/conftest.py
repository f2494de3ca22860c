"""Shared fakes and fixtures."""

from datetime import timedelta

import pytest

from audio_digest.config import RetryConfig
from audio_digest.domain import ObjectFetcher, UploadCredentialIssuer
from audio_digest.exceptions import FetchError, InvalidRequestError, TranscriptionError
from audio_digest.handlers import PipelineHandler
from audio_digest.infrastructure.interfaces import (
    StorageClient,
    SummarizationService,
    TranscriptionService,
)


class FakeStorage(StorageClient):
    """In-memory bucket that can be told to fail."""

    def __init__(self, objects=None, failures=None):
        self.objects = dict(objects or {})
        self.failures = list(failures or [])
        self.presign_calls = []
        self.download_calls = []
        self.presign_error = None

    def presign_upload(self, object_name, content_type, expires: timedelta) -> str:
        self.presign_calls.append((object_name, content_type, expires))
        if self.presign_error is not None:
            raise self.presign_error
        return f"https://storage.test/uploads/{object_name}?X-Amz-Signature=abc"

    def download(self, object_name, max_bytes) -> bytes:
        self.download_calls.append(object_name)
        if self.failures:
            raise self.failures.pop(0)
        if object_name not in self.objects:
            raise FetchError(object_name, Exception("NoSuchKey"))
        return self.objects[object_name]


class FakeTranscriber(TranscriptionService):
    def __init__(self, text="hello world", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def transcribe(self, audio_data, filename_hint):
        self.calls.append((audio_data, filename_hint))
        if self.error is not None:
            raise self.error
        return self.text


class EchoSummarizer(SummarizationService):
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def summarize(self, transcript):
        self.calls.append(transcript)
        if self.error is not None:
            raise self.error
        if not transcript.strip():
            raise InvalidRequestError("Cannot summarize an empty transcript")
        return transcript


AUDIO_KEY = "0123456789abcdef0123456789abcdef-meeting-notes.mp3"


@pytest.fixture
def retry_config():
    return RetryConfig(max_attempts=3, base_delay_seconds=0, max_delay_seconds=0)


@pytest.fixture
def storage():
    return FakeStorage(objects={AUDIO_KEY: b"ID3fake-audio"})


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def summarizer():
    return EchoSummarizer()


@pytest.fixture
def issuer(storage):
    return UploadCredentialIssuer(storage)


@pytest.fixture
def pipeline(storage, transcriber, summarizer, retry_config):
    return PipelineHandler(
        ObjectFetcher(storage, max_bytes=1024),
        transcriber,
        summarizer,
        retry_config,
    )


@pytest.fixture
def rejected_transcription():
    return TranscriptionError("meeting-notes.mp3", Exception("unsupported codec"))
