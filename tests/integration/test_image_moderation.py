from pathlib import Path

import pytest

from mediaguard.classification.exceptions import ClassificationNetworkError
from mediaguard.classification.models import Likelihood, SafeSearchVerdict
from mediaguard.context import AppContext
from mediaguard.moderation.handler import build_image_handler
from mediaguard.moderation.models import ModerationOutcome, UploadEvent

PHOTO = "users/u1/photo.jpg"


def _make_event(name: str | None = PHOTO, content_type: str | None = "image/jpeg") -> UploadEvent:
    return UploadEvent(bucket="uploads", name=name, content_type=content_type, size=1024)


class TestFlaggedImage:
    def test_replaces_with_placeholder(
        self, app_context: AppContext, bucket, temp_dir: Path  # type: ignore[no-untyped-def]
    ) -> None:
        app_context.image_classifier.classify.return_value = SafeSearchVerdict(
            adult=Likelihood.LIKELY, violence=Likelihood.UNKNOWN
        )

        outcome = build_image_handler(app_context).handle(_make_event())

        assert outcome is ModerationOutcome.REPLACED
        app_context.image_classifier.classify.assert_called_once_with(f"gs://uploads/{PHOTO}")
        assert bucket.objects[PHOTO] == bucket.objects["prohibited.png"]
        assert bucket.mutations == [("delete", PHOTO), ("upload", PHOTO)]
        assert list(temp_dir.iterdir()) == []

    def test_violence_alone_flags(self, app_context: AppContext, bucket) -> None:  # type: ignore[no-untyped-def]
        app_context.image_classifier.classify.return_value = SafeSearchVerdict(
            adult=Likelihood.VERY_UNLIKELY, violence=Likelihood.POSSIBLE
        )

        build_image_handler(app_context).handle(_make_event())

        assert bucket.objects[PHOTO] == bucket.objects["prohibited.png"]

    def test_replaying_flagged_event_is_idempotent(
        self, app_context: AppContext, bucket  # type: ignore[no-untyped-def]
    ) -> None:
        app_context.image_classifier.classify.return_value = SafeSearchVerdict(
            adult=Likelihood.VERY_LIKELY
        )
        handler = build_image_handler(app_context)

        handler.handle(_make_event())
        first = dict(bucket.objects)
        handler.handle(_make_event())

        assert bucket.objects == first


class TestSafeImage:
    @pytest.mark.parametrize(
        "likelihood",
        [Likelihood.UNKNOWN, Likelihood.VERY_UNLIKELY, Likelihood.UNLIKELY],
    )
    def test_never_deleted(
        self, app_context: AppContext, bucket, likelihood: Likelihood  # type: ignore[no-untyped-def]
    ) -> None:
        app_context.image_classifier.classify.return_value = SafeSearchVerdict(
            adult=likelihood, violence=likelihood
        )

        outcome = build_image_handler(app_context).handle(_make_event())

        assert outcome is ModerationOutcome.CLEARED
        assert bucket.objects[PHOTO] == b"original jpeg"
        assert bucket.mutations == []


class TestIgnoredEvents:
    @pytest.mark.parametrize(
        ("name", "content_type"),
        [(None, "image/jpeg"), (PHOTO, None), (PHOTO, "video/mp4"), (PHOTO, "text/plain")],
    )
    def test_no_calls_for_ignored_events(
        self,
        app_context: AppContext,
        bucket,  # type: ignore[no-untyped-def]
        name: str | None,
        content_type: str | None,
    ) -> None:
        outcome = build_image_handler(app_context).handle(_make_event(name, content_type))

        assert outcome is ModerationOutcome.SKIPPED
        app_context.image_classifier.classify.assert_not_called()
        assert bucket.calls == []


class TestFailures:
    def test_classifier_failure_propagates_without_mutation(
        self, app_context: AppContext, bucket  # type: ignore[no-untyped-def]
    ) -> None:
        app_context.image_classifier.classify.side_effect = ClassificationNetworkError("down")

        with pytest.raises(ClassificationNetworkError):
            build_image_handler(app_context).handle(_make_event())

        assert bucket.mutations == []
