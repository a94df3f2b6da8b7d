from mediaguard.classification.base import BaseImageClassifier, BaseVideoClassifier
from mediaguard.classification.factory import ClassifierFactory
from mediaguard.classification.models import (
    ExplicitContentVerdict,
    Likelihood,
    SafeSearchVerdict,
    is_flagged,
)

__all__ = [
    "BaseImageClassifier",
    "BaseVideoClassifier",
    "ClassifierFactory",
    "ExplicitContentVerdict",
    "Likelihood",
    "SafeSearchVerdict",
    "is_flagged",
]
