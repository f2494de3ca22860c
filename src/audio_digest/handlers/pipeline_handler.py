"""Orchestrates fetch, transcription and summarization of one upload."""

from audio_digest.config import RetryConfig
from audio_digest.domain import (
    FailureClassifier,
    ObjectFetcher,
    PipelineResult,
    PipelineState,
    StorageKey,
    call_with_retry,
    is_transient_failure,
)
from audio_digest.exceptions import (
    FetchError,
    InvalidRequestError,
    StageError,
    SummarizationError,
    TranscriptionError,
)
from audio_digest.infrastructure.interfaces import (
    SummarizationService,
    TranscriptionService,
)
from audio_digest.logging import setup_logging

logger = setup_logging()


class PipelineHandler:
    """
    Runs the fetch -> transcribe -> summarize pipeline for a storage key.

    Stages run strictly in order and the outcome is all-or-nothing: either a
    PipelineResult with both artifacts, or a single StageError naming the stage
    that failed. Each stage is retried according to the retry config for
    failures the classifier deems transient.
    """

    def __init__(
        self,
        fetcher: ObjectFetcher,
        transcription_service: TranscriptionService,
        summarization_service: SummarizationService,
        retry_config: RetryConfig,
        classifier: FailureClassifier = is_transient_failure,
    ):
        self._fetcher = fetcher
        self._transcription_service = transcription_service
        self._summarization_service = summarization_service
        self._retry_config = retry_config
        self._classifier = classifier

    def process(self, object_name: str | None) -> PipelineResult:
        """
        Produces a transcript and summary for an uploaded object.

        Args:
            object_name: Storage key returned when the upload URL was issued.

        Returns:
            PipelineResult with transcription and summary populated.

        Raises:
            InvalidRequestError: If the key is missing.
            FetchError: If the object cannot be read.
            TranscriptionError: If transcription fails.
            SummarizationError: If summarization fails.
        """
        if not object_name:
            raise InvalidRequestError("Missing file key in request body.")

        filename_hint = self._filename_hint(object_name)
        state = PipelineState.IDLE
        try:
            state = self._transition(state, PipelineState.FETCHING, object_name)
            audio_data = self._run(
                self._fetcher.fetch,
                object_name,
                wrap=lambda e: FetchError(object_name, e),
            )

            state = self._transition(state, PipelineState.TRANSCRIBING, object_name)
            transcription = self._run(
                self._transcription_service.transcribe,
                audio_data,
                filename_hint,
                wrap=lambda e: TranscriptionError(filename_hint, e),
            )
            del audio_data

            state = self._transition(state, PipelineState.SUMMARIZING, object_name)
            summary = self._run(
                self._summarization_service.summarize,
                transcription,
                wrap=lambda e: SummarizationError(f"Summarization failed: {e}", e),
            )

            self._transition(state, PipelineState.DONE, object_name)
            return PipelineResult(transcription=transcription, summary=summary)

        except StageError as e:
            logger.error(
                "Pipeline failed",
                extra={
                    "object_name": object_name,
                    "state": PipelineState.FAILED.value,
                    "stage": e.stage.value,
                    "error": e.message,
                },
            )
            raise

    def _run(self, fn, *args, wrap):
        """
        Calls one stage under the retry policy, tagging untagged errors.

        Input rejected inside a stage is that stage's failure, not a bad request.
        """
        try:
            return call_with_retry(
                fn,
                *args,
                config=self._retry_config,
                classifier=self._classifier,
            )
        except StageError:
            raise
        except Exception as e:
            raise wrap(e) from e

    @staticmethod
    def _transition(
        current: PipelineState, target: PipelineState, object_name: str
    ) -> PipelineState:
        logger.info(
            "Pipeline state changed",
            extra={
                "object_name": object_name,
                "from_state": current.value,
                "to_state": target.value,
            },
        )
        return target

    @staticmethod
    def _filename_hint(object_name: str) -> str:
        key = StorageKey.parse(object_name)
        return key.filename if key else object_name
