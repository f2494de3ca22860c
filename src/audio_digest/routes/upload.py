"""Upload URL endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from audio_digest.dependencies import get_issuer
from audio_digest.domain import UploadCredentialIssuer
from audio_digest.exceptions import CredentialIssuanceError, InvalidRequestError
from audio_digest.response_models import UploadUrlResponse

router = APIRouter(tags=["upload"])

IssuerDep = Annotated[UploadCredentialIssuer, Depends(get_issuer)]


@router.get("/generate-upload-url", response_model=UploadUrlResponse)
def generate_upload_url(
    issuer: IssuerDep,
    filename: str | None = None,
    content_type: Annotated[str | None, Query(alias="contentType")] = None,
) -> UploadUrlResponse:
    """
    Issues a one-hour presigned PUT URL for a direct upload to storage.

    The client uploads the file to the returned URL itself, then passes the
    returned key to /process-file.
    """
    try:
        credential = issuer.issue(filename, content_type)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except CredentialIssuanceError:
        raise HTTPException(status_code=500, detail="Failed to generate upload URL.")

    return UploadUrlResponse(url=credential.url, key=credential.key.object_name)
