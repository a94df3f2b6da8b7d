from google.api_core import exceptions as google_exceptions
from google.cloud import vision

from mediaguard.classification.base import BaseImageClassifier
from mediaguard.classification.exceptions import (
    ClassificationError,
    ClassificationNetworkError,
)
from mediaguard.classification.models import Likelihood, SafeSearchVerdict


class CloudVisionAdapter(BaseImageClassifier):
    """Safe-search detection built on the Cloud Vision API."""

    def __init__(self, client: vision.ImageAnnotatorClient | None = None) -> None:
        self._client = client if client is not None else vision.ImageAnnotatorClient()

    def classify(self, gcs_uri: str) -> SafeSearchVerdict:
        image = vision.Image(source=vision.ImageSource(image_uri=gcs_uri))
        try:
            response = self._client.safe_search_detection(image=image)
        except google_exceptions.GoogleAPIError as exc:
            raise ClassificationNetworkError(
                f"Vision API error for {gcs_uri}: {exc}"
            ) from exc

        if response.error.message:
            raise ClassificationError(
                f"Vision API rejected {gcs_uri}: {response.error.message}"
            )
        annotation = response.safe_search_annotation
        if annotation is None:
            return SafeSearchVerdict()
        return SafeSearchVerdict(
            adult=Likelihood.parse(annotation.adult),
            violence=Likelihood.parse(annotation.violence),
        )
