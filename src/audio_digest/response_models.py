"""Request and response models for the audio-digest API."""

from pydantic import BaseModel


class UploadUrlResponse(BaseModel):
    """Presigned upload URL and the key the object will be stored under."""

    url: str
    key: str


class ProcessFileRequest(BaseModel):
    """Body of a processing request."""

    key: str | None = None


class ProcessFileResponse(BaseModel):
    """Transcript and summary of an uploaded file."""

    transcription: str
    summary: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every endpoint."""

    error: str
    stage: str | None = None
    details: str | None = None
