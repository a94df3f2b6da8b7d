"""Network-free classifier adapters.

They rate every upload with one fixed likelihood. Intended for the Firebase
emulator suite and local runs where the Google APIs are unavailable.
"""

from mediaguard.classification.base import BaseImageClassifier, BaseVideoClassifier
from mediaguard.classification.models import (
    ExplicitContentVerdict,
    Likelihood,
    SafeSearchVerdict,
)


class StaticImageClassifier(BaseImageClassifier):
    """Reports the configured likelihood for both adult and violence."""

    def __init__(self, likelihood: Likelihood = Likelihood.VERY_UNLIKELY) -> None:
        self._likelihood = likelihood

    def classify(self, gcs_uri: str) -> SafeSearchVerdict:
        _ = gcs_uri
        return SafeSearchVerdict(adult=self._likelihood, violence=self._likelihood)


class StaticVideoClassifier(BaseVideoClassifier):
    """Reports a single frame with the configured likelihood."""

    def __init__(self, likelihood: Likelihood = Likelihood.VERY_UNLIKELY) -> None:
        self._likelihood = likelihood

    def classify(self, gcs_uri: str) -> ExplicitContentVerdict:
        _ = gcs_uri
        return ExplicitContentVerdict(frame_likelihoods=[self._likelihood])
