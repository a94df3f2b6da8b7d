import json
import tempfile
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_env: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )
    log_level: str = "INFO"

    storage_bucket: str = ""
    # Set by the Cloud Functions runtime for Firebase projects.
    firebase_config: str = ""
    image_placeholder_path: str = "prohibited.png"
    video_placeholder_path: str = "annotate.mp4"
    replacement_mode: str = "delete_then_upload"
    tmp_root: Path = Path(tempfile.gettempdir())

    classifier_provider: str = "google"
    static_classifier_likelihood: str = "VERY_UNLIKELY"
    video_annotation_timeout_seconds: int = 300

    signed_url_ttl_seconds: int = 3600
    signing_service_account_email: str = ""

    stream_base_url: str = Field(
        default="https://api.cloudflare.com/client/v4/accounts",
        validation_alias=AliasChoices("STREAM_BASE_URL", "CLOUDFLAR_BASE_URL"),
    )
    stream_account_id: str = Field(
        default="",
        validation_alias=AliasChoices("STREAM_ACCOUNT_ID", "CLOUDFLAR_ACCOUNT_ID"),
    )
    stream_api_token: str = Field(
        default="",
        validation_alias=AliasChoices("STREAM_API_TOKEN", "CLOUDFLAR_API_TOKEN"),
    )
    stream_timeout_seconds: int = 30

    # Deployment knobs, consumed by the deploy command rather than the handlers.
    max_instances: int = 100
    function_timeout_seconds: int = 300
    function_memory: str = "1GB"

    @property
    def min_instances(self) -> int:
        """Keep one warm instance in production, scale to zero elsewhere."""
        return 1 if self.app_env.lower() == "production" else 0

    @property
    def default_bucket_name(self) -> str:
        """Explicit storage_bucket, else the project's default Firebase bucket."""
        if self.storage_bucket:
            return self.storage_bucket
        if self.firebase_config:
            try:
                config = json.loads(self.firebase_config)
            except json.JSONDecodeError as exc:
                raise ValueError(f"FIREBASE_CONFIG is not valid JSON: {exc}") from exc
            bucket = config.get("storageBucket") if isinstance(config, dict) else None
            if bucket:
                return str(bucket)
        raise ValueError("storage_bucket is required when FIREBASE_CONFIG has no storageBucket")
