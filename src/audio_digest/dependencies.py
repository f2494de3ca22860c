"""Service composition and FastAPI dependency providers."""

from dataclasses import dataclass

import assemblyai as aai
import boto3
from botocore.config import Config as BotoConfig
from fastapi import Request
from google import genai
from minio import Minio

from audio_digest.config import AppConfig
from audio_digest.domain import ObjectFetcher, UploadCredentialIssuer
from audio_digest.handlers import PipelineHandler
from audio_digest.infrastructure import (
    AssemblyAITranscriber,
    GeminiSummarizer,
    MinioStorageClient,
)
from audio_digest.logging import setup_logging

logger = setup_logging()


@dataclass(frozen=True)
class Services:
    """Components shared read-only by all requests of one process."""

    issuer: UploadCredentialIssuer
    pipeline: PipelineHandler


def build_services(config: AppConfig) -> Services:
    """Constructs SDK clients and components from configuration, once per process."""
    # Storage
    minio_client = Minio(
        endpoint=config.storage.endpoint,
        access_key=config.storage.access_key,
        secret_key=config.storage.secret_key,
        region=config.storage.region,
        secure=config.storage.secure,
    )
    scheme = "https" if config.storage.secure else "http"
    presigner = boto3.client(
        "s3",
        endpoint_url=f"{scheme}://{config.storage.endpoint}",
        aws_access_key_id=config.storage.access_key,
        aws_secret_access_key=config.storage.secret_key,
        region_name=config.storage.region,
        config=BotoConfig(signature_version="s3v4"),
    )
    storage = MinioStorageClient(minio_client, config.storage.bucket_name, presigner)

    # AssemblyAI
    aai.settings.api_key = config.assemblyai.api_key
    aai_config = aai.TranscriptionConfig(
        language_detection=config.assemblyai.language_detection
    )
    transcriber = AssemblyAITranscriber(aai.Transcriber(config=aai_config))

    # Gemini
    gemini_client = genai.Client(api_key=config.gemini.api_key)
    summarizer = GeminiSummarizer(
        gemini_client,
        config.gemini.model_name,
        config.gemini.system_prompt,
        config.gemini.temperature,
    )

    logger.info(
        "Services initialized",
        extra={
            "storage_endpoint": config.storage.endpoint,
            "bucket_name": config.storage.bucket_name,
            "summary_model": config.gemini.model_name,
        },
    )

    return Services(
        issuer=UploadCredentialIssuer(
            storage, config.storage.upload_url_expiry_seconds
        ),
        pipeline=PipelineHandler(
            ObjectFetcher(storage, config.storage.max_object_bytes),
            transcriber,
            summarizer,
            config.retry,
        ),
    )


def get_issuer(request: Request) -> UploadCredentialIssuer:
    """Returns the process-wide upload credential issuer."""
    return request.app.state.services.issuer


def get_pipeline(request: Request) -> PipelineHandler:
    """Returns the process-wide pipeline handler."""
    return request.app.state.services.pipeline
