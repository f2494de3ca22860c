from datetime import timedelta

import pytest

from audio_digest.domain import StorageKey
from audio_digest.exceptions import CredentialIssuanceError, InvalidRequestError


def test_issue_returns_url_and_key(issuer, storage):
    credential = issuer.issue("interview.mp3", "audio/mpeg")

    assert credential.key.filename == "interview.mp3"
    assert credential.url.startswith("https://storage.test/uploads/")
    assert credential.content_type == "audio/mpeg"
    assert credential.expires_in == 3600

    (object_name, content_type, expires), = storage.presign_calls
    assert object_name == credential.key.object_name
    assert content_type == "audio/mpeg"
    assert expires == timedelta(seconds=3600)


def test_issued_key_round_trips(issuer):
    credential = issuer.issue("a-b-c.wav", "audio/wav")

    assert StorageKey.parse(credential.key.object_name).filename == "a-b-c.wav"


@pytest.mark.parametrize(
    "filename, content_type",
    [(None, "audio/mpeg"), ("clip.mp3", None), ("", "audio/mpeg"), ("clip.mp3", "")],
)
def test_missing_input_is_rejected_before_signing(issuer, storage, filename, content_type):
    with pytest.raises(InvalidRequestError):
        issuer.issue(filename, content_type)

    assert storage.presign_calls == []


def test_signing_failure_does_not_leak_backend_details(issuer, storage):
    storage.presign_error = RuntimeError("InvalidAccessKeyId: AKIASECRET")

    with pytest.raises(CredentialIssuanceError) as exc_info:
        issuer.issue("clip.mp3", "audio/mpeg")

    assert "AKIASECRET" not in str(exc_info.value)
    assert exc_info.value.cause is storage.presign_error
