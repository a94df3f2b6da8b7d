from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from mediaguard.logging.logger import Log


class ModerationOutcome(str, Enum):
    SKIPPED = "skipped"
    CLEARED = "cleared"
    REPLACED = "replaced"
    TRANSCODE_REQUESTED = "transcode_requested"


@dataclass(frozen=True)
class UploadEvent:
    """A finalized storage object, as delivered by the storage trigger."""

    bucket: str
    name: str | None = None
    content_type: str | None = None
    size: int | None = None
    generation: str | None = None

    @classmethod
    def from_event_data(cls, data: Mapping[str, object]) -> "UploadEvent":
        """Build from a Cloud Storage ``object.finalized`` CloudEvent payload."""
        return cls(
            bucket=str(data.get("bucket") or ""),
            name=_optional_str(data.get("name")),
            content_type=_optional_str(data.get("contentType")),
            size=_optional_int(data.get("size")),
            generation=_optional_str(data.get("generation")),
        )

    @property
    def gcs_uri(self) -> str:
        return f"gs://{self.bucket}/{self.name}"

    def has_content_type(self, prefix: str) -> bool:
        return isinstance(self.content_type, str) and self.content_type.startswith(prefix)


def _optional_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value: object) -> int | None:
    # The storage payload encodes int64 fields such as size as strings.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


@dataclass(frozen=True)
class ContentGuard:
    """Decides whether an upload event is one a handler should act on.

    Rejected events are a benign no-op: they are logged and never reach
    storage or a classifier.
    """

    media: str
    content_type_prefix: str
    skip_message: str

    def admits(self, event: UploadEvent) -> bool:
        if not event.name:
            Log.info("Object not found")
            return False
        if not event.has_content_type(self.content_type_prefix):
            Log.info(self.skip_message, path=event.name, content_type=event.content_type)
            return False
        return True


IMAGE_GUARD = ContentGuard(
    media="image",
    content_type_prefix="image/",
    skip_message="Only format images",
)
VIDEO_GUARD = ContentGuard(
    media="video",
    content_type_prefix="video/",
    skip_message="Only transcode videos",
)
