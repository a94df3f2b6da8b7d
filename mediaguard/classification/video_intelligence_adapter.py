import concurrent.futures

from google.api_core import exceptions as google_exceptions
from google.cloud import videointelligence

from mediaguard.classification.base import BaseVideoClassifier
from mediaguard.classification.exceptions import ClassificationNetworkError
from mediaguard.classification.models import ExplicitContentVerdict, Likelihood
from mediaguard.logging.logger import Log


class VideoIntelligenceAdapter(BaseVideoClassifier):
    """Explicit-content detection built on the Video Intelligence API."""

    def __init__(
        self,
        *,
        timeout_seconds: int,
        client: videointelligence.VideoIntelligenceServiceClient | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._client = (
            client if client is not None else videointelligence.VideoIntelligenceServiceClient()
        )

    def classify(self, gcs_uri: str) -> ExplicitContentVerdict:
        try:
            operation = self._client.annotate_video(
                request={
                    "features": [videointelligence.Feature.EXPLICIT_CONTENT_DETECTION],
                    "input_uri": gcs_uri,
                }
            )
            Log.info("Waiting for explicit content annotation", uri=gcs_uri)
            result = operation.result(timeout=self._timeout_seconds)
        except google_exceptions.GoogleAPIError as exc:
            raise ClassificationNetworkError(
                f"Video Intelligence API error for {gcs_uri}: {exc}"
            ) from exc
        except concurrent.futures.TimeoutError as exc:
            raise ClassificationNetworkError(
                f"Video annotation for {gcs_uri} did not finish within "
                f"{self._timeout_seconds}s"
            ) from exc

        frames = [
            Likelihood.parse(frame.pornography_likelihood)
            for annotation_result in (result.annotation_results or [])
            for frame in annotation_result.explicit_annotation.frames
        ]
        Log.info(f"Annotated {len(frames)} frames", uri=gcs_uri)
        return ExplicitContentVerdict(frame_likelihoods=frames)
