from dataclasses import dataclass, field
from enum import IntEnum


class Likelihood(IntEnum):
    """Ranked likelihood scale shared by the Vision and Video Intelligence APIs."""

    UNKNOWN = 0
    VERY_UNLIKELY = 1
    UNLIKELY = 2
    POSSIBLE = 3
    LIKELY = 4
    VERY_LIKELY = 5

    @classmethod
    def parse(cls, value: object) -> "Likelihood":
        """Coerce an API enum, ordinal or name into a Likelihood.

        Unrecognised values map to UNKNOWN, which never flags content.
        """
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper(), cls.UNKNOWN)
        if isinstance(value, int):
            try:
                return cls(int(value))
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN


FLAG_THRESHOLD = Likelihood.POSSIBLE


def is_flagged(likelihood: Likelihood) -> bool:
    """Moderation policy: POSSIBLE, LIKELY and VERY_LIKELY are flagged."""
    return likelihood >= FLAG_THRESHOLD


@dataclass(frozen=True)
class SafeSearchVerdict:
    """Safe-search result for a single image."""

    adult: Likelihood = Likelihood.UNKNOWN
    violence: Likelihood = Likelihood.UNKNOWN

    @property
    def flagged(self) -> bool:
        return is_flagged(self.adult) or is_flagged(self.violence)


@dataclass(frozen=True)
class ExplicitContentVerdict:
    """Per-frame pornography likelihoods for a video.

    A video with no annotated frames is not flagged.
    """

    frame_likelihoods: list[Likelihood] = field(default_factory=list)

    @property
    def flagged(self) -> bool:
        return any(is_flagged(likelihood) for likelihood in self.frame_likelihoods)
