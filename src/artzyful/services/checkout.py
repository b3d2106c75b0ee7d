"""Hosted checkout creation and lookup."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from artzyful.domain.checkout import (
    PRODUCTS,
    CheckoutSession,
    Product,
    SessionDetails,
)
from artzyful.domain.errors import (
    InvalidRequestError,
    SessionNotFoundError,
    UnknownProductError,
    UnknownStyleError,
)
from artzyful.domain.images import ReducedImage
from artzyful.domain.styles import is_known_style
from artzyful.services.image_reducer import ImageSizeReducer

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    """Interface for the hosted checkout provider."""

    async def create_session(
        self,
        *,
        product: Product,
        currency: str,
        metadata: dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a hosted checkout session for one product."""

    async def retrieve_session(self, session_id: str) -> SessionDetails | None:
        """Return a checkout session, or None when it does not exist."""


@dataclass(frozen=True)
class CheckoutResult:
    """Created checkout session with the image reference that was attached."""

    session: CheckoutSession
    image: ReducedImage


@dataclass
class CheckoutService:
    """Validates orders and hands them to the payment gateway."""

    gateway: PaymentGateway
    reducer: ImageSizeReducer
    success_url: str
    cancel_url: str
    currency: str = "usd"
    metadata_max_length: int = 500

    async def create_checkout(
        self,
        image_url: str | None,
        style: str | None,
        product_type: str | None,
    ) -> CheckoutResult:
        """Create a checkout session carrying the order in its metadata."""
        if not image_url or not style or not product_type:
            raise InvalidRequestError(
                "imageUrl, style, and productType are required"
            )
        product = PRODUCTS.get(product_type)
        if product is None:
            raise UnknownProductError(product_type)
        if not is_known_style(style):
            raise UnknownStyleError(style)

        image = await asyncio.to_thread(
            self.reducer.reduce, image_url, self.metadata_max_length
        )
        metadata = {
            "imageUrl": image.value,
            "imageReduction": image.outcome.value,
            "style": style,
            "productType": product.product_type,
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }
        session = await self.gateway.create_session(
            product=product,
            currency=self.currency,
            metadata=metadata,
            success_url=self.success_url,
            cancel_url=self.cancel_url,
        )
        logger.info(
            "Checkout session created",
            extra={
                "session_id": session.id,
                "product_type": product.product_type,
                "image_reduction": image.outcome.value,
            },
        )
        return CheckoutResult(session=session, image=image)

    async def get_session(self, session_id: str | None) -> SessionDetails:
        """Return a checkout session by id."""
        if not session_id:
            raise InvalidRequestError("sessionId is required")
        details = await self.gateway.retrieve_session(session_id)
        if details is None:
            raise SessionNotFoundError(session_id)
        return details
