"""Cloud Functions entry points for the storage ``object.finalized`` trigger.

Deploy each function against the uploads bucket, for example::

    gcloud functions deploy process_images --gen2 --runtime=python312 \
        --entry-point=process_images --trigger-bucket=<bucket> \
        --memory=1GiB --timeout=300s --max-instances=100
"""

from functools import lru_cache

import functions_framework
from cloudevents.http import CloudEvent

from mediaguard.config.settings import Settings
from mediaguard.context import AppContext, build_context
from mediaguard.logging.logger import Log
from mediaguard.moderation.handler import (
    ModerationHandler,
    build_image_handler,
    build_video_handler,
)
from mediaguard.moderation.models import (
    IMAGE_GUARD,
    VIDEO_GUARD,
    ContentGuard,
    UploadEvent,
)


@lru_cache(maxsize=1)
def _settings() -> Settings:
    settings = Settings()
    Log.configure(settings.log_level)
    return settings


@lru_cache(maxsize=1)
def _app_context() -> AppContext:
    settings = _settings()
    Log.info(
        "Initialized media moderation",
        env=settings.app_env,
        min_instances=settings.min_instances,
    )
    return build_context(settings)


@lru_cache(maxsize=1)
def _image_handler() -> ModerationHandler:
    return build_image_handler(_app_context())


@lru_cache(maxsize=1)
def _video_handler() -> ModerationHandler:
    return build_video_handler(_app_context())


def _admitted_event(cloud_event: CloudEvent, guard: ContentGuard) -> UploadEvent | None:
    """Parse the event and apply the guard before any client is built."""
    _settings()
    event = UploadEvent.from_event_data(cloud_event.data or {})
    return event if guard.admits(event) else None


@functions_framework.cloud_event
def process_images(cloud_event: CloudEvent) -> None:
    """Replace adult or violent images with the placeholder image."""
    event = _admitted_event(cloud_event, IMAGE_GUARD)
    if event is not None:
        _image_handler().handle(event)


@functions_framework.cloud_event
def transcode_video(cloud_event: CloudEvent) -> None:
    """Replace explicit videos with the placeholder video, transcode the rest."""
    event = _admitted_event(cloud_event, VIDEO_GUARD)
    if event is not None:
        _video_handler().handle(event)
