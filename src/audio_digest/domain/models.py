"""Domain models for the upload-and-digest pipeline."""

import re
from enum import Enum

from pydantic import BaseModel, Field

RANDOM_ID_LENGTH = 32
_KEY_PATTERN = re.compile(rf"^(?P<random_id>[0-9a-f]{{{RANDOM_ID_LENGTH}}})-(?P<filename>.+)$", re.S)


class StorageKey(BaseModel, frozen=True):
    """
    Identifier of an uploaded object.

    Rendered in storage as ``<random_id>-<filename>``. The random part has a
    fixed width, so parsing strips exactly that prefix and filenames that
    themselves contain hyphens are recovered unchanged.
    """

    random_id: str = Field(pattern=rf"^[0-9a-f]{{{RANDOM_ID_LENGTH}}}$")
    filename: str = Field(min_length=1)

    @property
    def object_name(self) -> str:
        return f"{self.random_id}-{self.filename}"

    @classmethod
    def parse(cls, object_name: str) -> "StorageKey | None":
        """
        Parses an object name produced by ``object_name``.

        Returns:
            The StorageKey, or None if the name was not minted by this service.
        """
        match = _KEY_PATTERN.match(object_name)
        if match is None:
            return None
        return cls(random_id=match["random_id"], filename=match["filename"])

    def __str__(self) -> str:
        return self.object_name


class UploadCredential(BaseModel, frozen=True):
    """A presigned URL authorizing one direct PUT of an object."""

    url: str
    key: StorageKey
    content_type: str
    expires_in: int


class PipelineResult(BaseModel, frozen=True):
    """Transcript and summary produced for one uploaded object."""

    transcription: str
    summary: str


class PipelineState(str, Enum):
    """States of a single pipeline run."""

    IDLE = "idle"
    FETCHING = "fetching"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    DONE = "done"
    FAILED = "failed"
