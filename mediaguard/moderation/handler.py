from mediaguard.context import AppContext
from mediaguard.logging.logger import Log
from mediaguard.moderation.models import (
    IMAGE_GUARD,
    VIDEO_GUARD,
    ContentGuard,
    ModerationOutcome,
    UploadEvent,
)
from mediaguard.moderation.pipeline import ModerationContext, PipelineStep
from mediaguard.moderation.steps import (
    ClassifyImageStep,
    ClassifyVideoStep,
    ReplaceWithPlaceholderStep,
    RequestTranscodeStep,
)


class ModerationHandler:
    """Guards an upload event by content type, then runs the moderation steps.

    Pipeline: classify -> (replace with placeholder | forward).
    Failures are logged and re-raised so the platform can retry the event.
    """

    def __init__(self, *, guard: ContentGuard, steps: list[PipelineStep]) -> None:
        self._guard = guard
        self._steps = steps

    @property
    def guard(self) -> ContentGuard:
        return self._guard

    def handle(self, event: UploadEvent) -> ModerationOutcome:
        if not self._guard.admits(event):
            return ModerationOutcome.SKIPPED

        media = self._guard.media
        context = ModerationContext(event=event)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception:
            Log.exception(f"Processing {media} {event.name} failed")
            raise

        Log.info(
            f"Processing {media} finished",
            path=event.name,
            outcome=context.outcome.value,
        )
        return context.outcome


def build_image_handler(app: AppContext) -> ModerationHandler:
    return ModerationHandler(
        guard=IMAGE_GUARD,
        steps=[
            ClassifyImageStep(app.image_classifier),
            ReplaceWithPlaceholderStep(app.replacer, app.settings.image_placeholder_path),
        ],
    )


def build_video_handler(app: AppContext) -> ModerationHandler:
    return ModerationHandler(
        guard=VIDEO_GUARD,
        steps=[
            ClassifyVideoStep(app.video_classifier),
            ReplaceWithPlaceholderStep(app.replacer, app.settings.video_placeholder_path),
            RequestTranscodeStep(
                app.bucket,
                app.stream_client,
                app.settings.signed_url_ttl_seconds,
            ),
        ],
    )
