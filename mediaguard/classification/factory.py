from typing import ClassVar

from mediaguard.classification.base import BaseImageClassifier, BaseVideoClassifier
from mediaguard.classification.models import Likelihood
from mediaguard.classification.static_adapter import (
    StaticImageClassifier,
    StaticVideoClassifier,
)
from mediaguard.classification.video_intelligence_adapter import VideoIntelligenceAdapter
from mediaguard.classification.vision_adapter import CloudVisionAdapter
from mediaguard.config.settings import Settings


class ClassifierFactory:
    """Creates the configured image and video classifier adapters."""

    PROVIDERS: ClassVar[list[str]] = ["google", "static"]

    @classmethod
    def create_image(cls, settings: Settings) -> BaseImageClassifier:
        provider = cls._resolve_provider(settings)
        if provider == "static":
            return StaticImageClassifier(cls._static_likelihood(settings))
        return CloudVisionAdapter()

    @classmethod
    def create_video(cls, settings: Settings) -> BaseVideoClassifier:
        provider = cls._resolve_provider(settings)
        if provider == "static":
            return StaticVideoClassifier(cls._static_likelihood(settings))
        return VideoIntelligenceAdapter(
            timeout_seconds=settings.video_annotation_timeout_seconds,
        )

    @classmethod
    def _resolve_provider(cls, settings: Settings) -> str:
        provider = settings.classifier_provider.lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown classifier provider '{provider}'. Choose from: {cls.PROVIDERS}"
            )
        return provider

    @staticmethod
    def _static_likelihood(settings: Settings) -> Likelihood:
        value = settings.static_classifier_likelihood.strip().upper()
        if value not in Likelihood.__members__:
            raise ValueError(
                f"Unknown likelihood '{value}'. Choose from: {list(Likelihood.__members__)}"
            )
        return Likelihood[value]
