"""Image models shared by the reducer, generation and print services."""

from dataclasses import dataclass
from enum import StrEnum


class ReductionOutcome(StrEnum):
    """How the image size reducer produced its value."""

    FITS = "fits"
    RECOMPRESSED = "recompressed"
    PASSTHROUGH = "passthrough"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class ReducedImage:
    """Textual image reference produced for a size-limited channel."""

    value: str
    outcome: ReductionOutcome

    @property
    def is_lossy(self) -> bool:
        """Return true when pixels or text were thrown away."""
        return self.outcome in {
            ReductionOutcome.RECOMPRESSED,
            ReductionOutcome.TRUNCATED,
        }

    @property
    def is_decodable(self) -> bool:
        """Return true when the value can still be used as an image reference."""
        return self.outcome is not ReductionOutcome.TRUNCATED


@dataclass(frozen=True)
class GeneratedImage:
    """Stylized image returned by the image-edit provider."""

    style: str
    image_url: str
    display_name: str
    prompt: str


@dataclass(frozen=True)
class PrintImage:
    """Print-ready JPEG encoded as a data URL."""

    data_url: str
    width: int
    height: int
    orientation: str
