"""Shrink image references so they fit size-limited text channels."""

import base64
import logging
from dataclasses import dataclass
from io import BytesIO

from PIL import Image

from artzyful.domain.images import ReducedImage, ReductionOutcome

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...[truncated]"


@dataclass(frozen=True)
class ImageSizeReducer:
    """Downscale, recompress and as a last resort truncate image references.

    The result always fits ``max_length`` unless the caller passes a
    ``fallback_max_length`` and the image could not be recompressed, in which
    case the original is handed back untouched when it fits that looser limit.
    A truncated value is not guaranteed to decode as an image.
    """

    max_width: int = 200
    quality: int = 60
    marker: str = TRUNCATION_MARKER

    def __post_init__(self) -> None:
        if self.max_width < 1:
            raise ValueError("max_width must be positive")
        if not 1 <= self.quality <= 95:  # noqa: PLR2004
            raise ValueError("quality must be between 1 and 95")

    def reduce(
        self,
        source: bytes | str,
        max_length: int,
        fallback_max_length: int | None = None,
    ) -> ReducedImage:
        """Return a textual reference for ``source`` that fits ``max_length``."""
        max_length = max(max_length, 0)
        text = source if isinstance(source, str) else to_data_url(source)
        if len(text) <= max_length:
            return ReducedImage(value=text, outcome=ReductionOutcome.FITS)

        recompressed: str | None = None
        try:
            image_bytes = source if isinstance(source, bytes) else decode_data_url(text)
            recompressed = to_data_url(self.recompress(image_bytes), "image/jpeg")
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Image recompression failed",
                extra={"error": f"{type(exc).__name__}: {exc}"},
            )
            if fallback_max_length is not None and len(text) <= fallback_max_length:
                return ReducedImage(value=text, outcome=ReductionOutcome.PASSTHROUGH)
        else:
            if len(recompressed) <= max_length:
                return ReducedImage(
                    value=recompressed, outcome=ReductionOutcome.RECOMPRESSED
                )

        candidate = recompressed or text
        logger.warning(
            "Image reference truncated",
            extra={"length": len(candidate), "max_length": max_length},
        )
        return ReducedImage(
            value=_truncate(candidate, max_length, self.marker),
            outcome=ReductionOutcome.TRUNCATED,
        )

    def recompress(self, image_bytes: bytes) -> bytes:
        """Re-encode the image as a small JPEG thumbnail."""
        with Image.open(BytesIO(image_bytes)) as image:
            rgb = image.convert("RGB")
        target = target_size(rgb.size, self.max_width)
        if target != rgb.size:
            rgb = rgb.resize(target, Image.Resampling.LANCZOS)
        out = BytesIO()
        rgb.save(out, format="JPEG", quality=self.quality, optimize=True)
        return out.getvalue()


def target_size(size: tuple[int, int], max_width: int) -> tuple[int, int]:
    """Scale ``size`` down to ``max_width`` keeping aspect ratio, never up."""
    width, height = size
    if width <= max_width:
        return size
    return max_width, max(1, round(height * max_width / width))


def to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Convert bytes to a base64 data URL."""
    resolved = mime_type or detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{resolved};base64,{encoded}"


def decode_data_url(data_url: str) -> bytes:
    """Return the payload of a base64 data URL."""
    header, separator, payload = data_url.partition(",")
    if not separator or not header.startswith("data:") or not header.endswith(
        ";base64"
    ):
        raise ValueError("Not a base64 data URL")
    return base64.b64decode(payload, validate=True)


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    if image_bytes.startswith(b"BM"):
        return "image/bmp"
    return "image/jpeg"


def _truncate(text: str, max_length: int, marker: str) -> str:
    keep = max(max_length - len(marker), 0)
    return (text[:keep] + marker)[:max_length]
