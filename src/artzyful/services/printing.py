"""Print-ready image preparation."""

import asyncio
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Protocol

from PIL import Image, ImageOps

from artzyful.domain.errors import ImageProcessingError, InvalidRequestError
from artzyful.domain.images import PrintImage
from artzyful.services.image_reducer import to_data_url

logger = logging.getLogger(__name__)

# 2:3 and 3:2 at 600 dpi for 4x6 prints.
PRINT_DIMENSIONS: dict[str, tuple[int, int]] = {
    "portrait": (2400, 3600),
    "landscape": (3600, 2400),
}


class ImageFetcher(Protocol):
    """Interface for downloading image bytes."""

    async def fetch(self, image_url: str) -> bytes:
        """Return the bytes behind an http(s) or data URL."""


@dataclass
class PrintService:
    """Crops generated images to print aspect ratios."""

    fetcher: ImageFetcher
    quality: int = 95

    async def prepare(
        self, image_url: str | None, orientation: str | None
    ) -> PrintImage:
        """Download, crop and re-encode an image for printing."""
        if not image_url:
            raise InvalidRequestError("Image URL is required")
        if orientation not in PRINT_DIMENSIONS:
            raise InvalidRequestError('Orientation must be "portrait" or "landscape"')
        try:
            image_bytes = await self.fetcher.fetch(image_url)
        except Exception as exc:
            logger.exception("Failed to download image for printing")
            raise InvalidRequestError("Failed to download image") from exc

        width, height = PRINT_DIMENSIONS[orientation]
        try:
            jpeg = await asyncio.to_thread(self._render, image_bytes, (width, height))
        except Exception as exc:
            logger.exception("Failed to process image for printing")
            raise ImageProcessingError("Failed to process image for printing") from exc
        return PrintImage(
            data_url=to_data_url(jpeg, "image/jpeg"),
            width=width,
            height=height,
            orientation=orientation,
        )

    def _render(self, image_bytes: bytes, size: tuple[int, int]) -> bytes:
        with Image.open(BytesIO(image_bytes)) as image:
            rgb = image.convert("RGB")
        fitted = ImageOps.fit(rgb, size, Image.Resampling.LANCZOS, centering=(0.5, 0.5))
        out = BytesIO()
        fitted.save(out, format="JPEG", quality=self.quality, progressive=True)
        return out.getvalue()
