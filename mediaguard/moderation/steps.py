import posixpath

from mediaguard.classification.base import BaseImageClassifier, BaseVideoClassifier
from mediaguard.logging.logger import Log
from mediaguard.moderation.exceptions import ModerationError
from mediaguard.moderation.models import ModerationOutcome
from mediaguard.moderation.pipeline import ModerationContext, PipelineStep
from mediaguard.storage.bucket import MediaBucket
from mediaguard.storage.placeholder import PlaceholderReplacer
from mediaguard.transcoding.stream_client import StreamCopyClient


def _is_flagged_verdict(context: ModerationContext, step: str) -> bool:
    if context.verdict is None:
        raise ModerationError(f"ModerationContext.verdict must be set before {step}")
    return context.verdict.flagged


class ClassifyImageStep(PipelineStep):
    def __init__(self, classifier: BaseImageClassifier) -> None:
        self._classifier = classifier

    def run(self, context: ModerationContext) -> ModerationContext:
        verdict = self._classifier.classify(context.event.gcs_uri)
        context.verdict = verdict
        Log.info(
            f"Safe search for {context.path}: "
            f"adult={verdict.adult.name} violence={verdict.violence.name}"
        )
        if verdict.flagged:
            Log.info("Adult or violent content detected", path=context.path)
        return context


class ClassifyVideoStep(PipelineStep):
    def __init__(self, classifier: BaseVideoClassifier) -> None:
        self._classifier = classifier

    def run(self, context: ModerationContext) -> ModerationContext:
        verdict = self._classifier.classify(context.event.gcs_uri)
        context.verdict = verdict
        if verdict.flagged:
            Log.info("Adult or violent content detected", path=context.path)
        return context


class ReplaceWithPlaceholderStep(PipelineStep):
    """Runs only for flagged content."""

    def __init__(self, replacer: PlaceholderReplacer, placeholder_path: str) -> None:
        self._replacer = replacer
        self._placeholder_path = placeholder_path

    def run(self, context: ModerationContext) -> ModerationContext:
        if not _is_flagged_verdict(context, "placeholder replacement"):
            return context
        self._replacer.replace(context.path, self._placeholder_path)
        context.outcome = ModerationOutcome.REPLACED
        return context


class RequestTranscodeStep(PipelineStep):
    """Runs only for content that was not flagged."""

    def __init__(
        self,
        bucket: MediaBucket,
        stream_client: StreamCopyClient,
        signed_url_ttl_seconds: int,
    ) -> None:
        self._bucket = bucket
        self._stream_client = stream_client
        self._ttl_seconds = signed_url_ttl_seconds

    def run(self, context: ModerationContext) -> ModerationContext:
        if _is_flagged_verdict(context, "transcoding"):
            return context
        path = context.path
        context.signed_url = self._bucket.signed_download_url(path, self._ttl_seconds)
        self._stream_client.copy_from_url(
            context.signed_url,
            name=posixpath.basename(path),
            path=path,
        )
        context.outcome = ModerationOutcome.TRANSCODE_REQUESTED
        return context
