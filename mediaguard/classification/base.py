from abc import ABC, abstractmethod

from mediaguard.classification.models import ExplicitContentVerdict, SafeSearchVerdict


class BaseImageClassifier(ABC):
    """Contract for image safe-search adapters."""

    @abstractmethod
    def classify(self, gcs_uri: str) -> SafeSearchVerdict:
        """Rate adult and violence likelihood of the image at gcs_uri.

        Raises:
            ClassificationError: on any failure.
        """


class BaseVideoClassifier(ABC):
    """Contract for video explicit-content adapters."""

    @abstractmethod
    def classify(self, gcs_uri: str) -> ExplicitContentVerdict:
        """Rate pornography likelihood of every annotated frame of the video.

        Blocks until the remote annotation job completes.

        Raises:
            ClassificationError: on any failure.
        """
