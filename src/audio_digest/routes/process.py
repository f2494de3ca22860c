"""File processing endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from audio_digest.dependencies import get_pipeline
from audio_digest.exceptions import InvalidRequestError, StageError
from audio_digest.handlers import PipelineHandler
from audio_digest.response_models import (
    ErrorResponse,
    ProcessFileRequest,
    ProcessFileResponse,
)

router = APIRouter(tags=["process"])

PipelineDep = Annotated[PipelineHandler, Depends(get_pipeline)]


@router.post(
    "/process-file",
    response_model=ProcessFileResponse,
    responses={500: {"model": ErrorResponse}},
)
def process_file(body: ProcessFileRequest, pipeline: PipelineDep):
    """Fetches an uploaded file, transcribes it and summarizes the transcript."""
    try:
        result = pipeline.process(body.key)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StageError as e:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Failed to process file.",
                stage=e.stage.value,
                details=e.message,
            ).model_dump(),
        )

    return ProcessFileResponse(
        transcription=result.transcription,
        summary=result.summary,
    )
