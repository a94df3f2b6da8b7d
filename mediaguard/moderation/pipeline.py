from abc import ABC, abstractmethod
from dataclasses import dataclass

from mediaguard.classification.models import ExplicitContentVerdict, SafeSearchVerdict
from mediaguard.moderation.models import ModerationOutcome, UploadEvent


@dataclass(slots=True)
class ModerationContext:
    event: UploadEvent
    verdict: SafeSearchVerdict | ExplicitContentVerdict | None = None
    outcome: ModerationOutcome = ModerationOutcome.CLEARED
    signed_url: str = ""

    @property
    def path(self) -> str:
        if not self.event.name:
            raise ValueError("ModerationContext.event.name must be set")
        return self.event.name


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ModerationContext) -> ModerationContext:
        raise NotImplementedError
