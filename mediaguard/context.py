from dataclasses import dataclass

from google.cloud import storage

from mediaguard.classification.base import BaseImageClassifier, BaseVideoClassifier
from mediaguard.classification.factory import ClassifierFactory
from mediaguard.config.settings import Settings
from mediaguard.storage.bucket import MediaBucket
from mediaguard.storage.placeholder import PlaceholderReplacer
from mediaguard.transcoding.stream_client import StreamCopyClient


@dataclass(frozen=True)
class AppContext:
    """Process-wide collaborators, built once and shared by both handlers."""

    settings: Settings
    bucket: MediaBucket
    replacer: PlaceholderReplacer
    image_classifier: BaseImageClassifier
    video_classifier: BaseVideoClassifier
    stream_client: StreamCopyClient


def build_context(
    settings: Settings,
    storage_client: storage.Client | None = None,
) -> AppContext:
    """Build an AppContext with all required adapters."""
    bucket_name = settings.default_bucket_name
    client = storage_client if storage_client is not None else storage.Client()
    bucket = MediaBucket(
        client.bucket(bucket_name),
        signing_service_account_email=settings.signing_service_account_email,
    )
    return AppContext(
        settings=settings,
        bucket=bucket,
        replacer=PlaceholderReplacer(
            bucket,
            tmp_root=settings.tmp_root,
            mode=settings.replacement_mode,
        ),
        image_classifier=ClassifierFactory.create_image(settings),
        video_classifier=ClassifierFactory.create_video(settings),
        stream_client=StreamCopyClient(
            base_url=settings.stream_base_url,
            account_id=settings.stream_account_id,
            api_token=settings.stream_api_token,
            timeout_seconds=settings.stream_timeout_seconds,
        ),
    )
