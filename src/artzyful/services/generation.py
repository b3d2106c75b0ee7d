"""Stylized image generation and post-payment fulfillment."""

import logging
from dataclasses import dataclass
from typing import Protocol

from artzyful.domain.checkout import BUNDLE, SINGLE, SessionDetails
from artzyful.domain.errors import (
    InvalidRequestError,
    PaymentRequiredError,
    UnknownProductError,
)
from artzyful.domain.images import GeneratedImage, ReductionOutcome
from artzyful.domain.styles import STYLE_ORDER
from artzyful.services.catalog import CatalogService

logger = logging.getLogger(__name__)


class ImageEditClient(Protocol):
    """Interface for the image-editing provider."""

    model: str

    async def edit(self, *, image_url: str, prompt: str) -> str:
        """Apply the instruction to the source image and return the result URL."""


@dataclass
class GenerationService:
    """Turns a source image and style into stylized images."""

    client: ImageEditClient
    catalog: CatalogService

    async def edit_image(
        self, image_url: str | None, style: str | None
    ) -> GeneratedImage:
        """Generate one stylized image."""
        if not image_url or not style:
            raise InvalidRequestError("imageUrl and style are required")
        prompt = self.catalog.resolve_prompt(style)
        logger.info(
            "Generating image", extra={"style": style, "model": self.client.model}
        )
        result_url = await self.client.edit(image_url=image_url, prompt=prompt)
        return GeneratedImage(
            style=style,
            image_url=result_url,
            display_name=self.catalog.display_name(style),
            prompt=prompt,
        )

    async def generate_bundle(self, image_url: str | None) -> list[GeneratedImage]:
        """Generate every style in canonical order, one call at a time."""
        if not image_url:
            raise InvalidRequestError("imageUrl is required")
        images = []
        for style in STYLE_ORDER:
            images.append(await self.edit_image(image_url, style))
        return images

    async def fulfill(self, session: SessionDetails) -> list[GeneratedImage]:
        """Generate the images a paid checkout session is entitled to."""
        if not session.is_paid:
            raise PaymentRequiredError(
                f"Session {session.id} is not paid ({session.payment_status})"
            )
        metadata = session.metadata
        if metadata.get("imageReduction") == ReductionOutcome.TRUNCATED.value:
            raise InvalidRequestError(
                "The image attached to this session was truncated and cannot be used"
            )
        product_type = metadata.get("productType", "")
        logger.info(
            "Fulfilling checkout session",
            extra={"session_id": session.id, "product_type": product_type},
        )
        if product_type == SINGLE:
            image = await self.edit_image(
                metadata.get("imageUrl"), metadata.get("style")
            )
            return [image]
        if product_type == BUNDLE:
            return await self.generate_bundle(metadata.get("imageUrl"))
        raise UnknownProductError(product_type)
