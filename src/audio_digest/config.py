"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field

DEFAULT_SUMMARY_PROMPT = (
    "You are a highly skilled assistant that summarizes texts. Please provide a "
    "concise summary of the following transcript, highlighting the key points and "
    "any action items. Format the output in Japanese."
)


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration."""

    endpoint: str
    access_key: str
    secret_key: str
    bucket_name: str = "uploads"
    region: str = "auto"
    secure: bool = True
    upload_url_expiry_seconds: int = 3600
    max_object_bytes: int = Field(default=25 * 1024 * 1024, gt=0)


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    language_detection: bool = True


class GeminiConfig(BaseModel, frozen=True):
    """Gemini summarization configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    system_prompt: str = DEFAULT_SUMMARY_PROMPT
    temperature: float = 0.5


class RetryConfig(BaseModel, frozen=True):
    """Bounded retry applied to each pipeline stage."""

    max_attempts: int = Field(default=3, ge=1)
    base_delay_seconds: float = Field(default=1.0, ge=0)
    max_delay_seconds: float = Field(default=10.0, ge=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    storage: StorageConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    retry: RetryConfig = RetryConfig()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _storage_endpoint() -> str:
    endpoint = os.getenv("STORAGE_ENDPOINT", "")
    if endpoint:
        return endpoint
    account_id = os.getenv("STORAGE_ACCOUNT_ID", "")
    if account_id:
        return f"{account_id}.r2.cloudflarestorage.com"
    return "minio:9000"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        storage=StorageConfig(
            endpoint=_storage_endpoint(),
            access_key=os.getenv("STORAGE_ACCESS_KEY_ID", ""),
            secret_key=os.getenv("STORAGE_SECRET_ACCESS_KEY", ""),
            bucket_name=os.getenv("STORAGE_BUCKET_NAME", "uploads"),
            region=os.getenv("STORAGE_REGION", "auto"),
            secure=_env_flag("STORAGE_SECURE", "true"),
            max_object_bytes=int(os.getenv("STORAGE_MAX_OBJECT_BYTES", "26214400")),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            language_detection=_env_flag("ASSEMBLYAI_LANGUAGE_DETECTION", "true"),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash-lite"),
            system_prompt=os.getenv("SUMMARY_SYSTEM_PROMPT", DEFAULT_SUMMARY_PROMPT),
        ),
        retry=RetryConfig(
            max_attempts=int(os.getenv("RETRY_MAX_ATTEMPTS", "3")),
            base_delay_seconds=float(os.getenv("RETRY_BASE_DELAY_SECONDS", "1.0")),
            max_delay_seconds=float(os.getenv("RETRY_MAX_DELAY_SECONDS", "10.0")),
        ),
    )
