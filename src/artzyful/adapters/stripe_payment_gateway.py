"""Stripe hosted checkout gateway."""

import logging
from dataclasses import dataclass

import stripe

from artzyful.domain.checkout import CheckoutSession, Product, SessionDetails
from artzyful.domain.errors import ProviderError
from artzyful.services.checkout import PaymentGateway

logger = logging.getLogger(__name__)


@dataclass
class StripePaymentGateway(PaymentGateway):
    """Payment gateway backed by Stripe Checkout."""

    client: stripe.StripeClient

    @classmethod
    def create(cls, api_key: str) -> "StripePaymentGateway":
        """Create a gateway with its own Stripe client."""
        return cls(client=stripe.StripeClient(api_key))

    async def create_session(
        self,
        *,
        product: Product,
        currency: str,
        metadata: dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a one-item card payment session."""
        params = {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": currency,
                        "product_data": {
                            "name": product.name,
                            "description": product.description,
                        },
                        "unit_amount": product.unit_amount,
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": metadata,
        }
        try:
            session = await self.client.checkout.sessions.create_async(
                params=params
            )
        except stripe.StripeError as exc:
            logger.exception("Stripe checkout session creation failed")
            raise ProviderError(_stripe_message(exc)) from exc
        return CheckoutSession(id=session.id, url=session.url)

    async def retrieve_session(self, session_id: str) -> SessionDetails | None:
        """Fetch a checkout session by id."""
        try:
            session = await self.client.checkout.sessions.retrieve_async(
                session_id
            )
        except stripe.InvalidRequestError as exc:
            if exc.code == "resource_missing":
                return None
            logger.exception("Stripe session lookup failed")
            raise ProviderError(_stripe_message(exc)) from exc
        except stripe.StripeError as exc:
            logger.exception("Stripe session lookup failed")
            raise ProviderError(_stripe_message(exc)) from exc
        return SessionDetails(
            id=session.id,
            payment_status=session.payment_status,
            amount_total=session.amount_total,
            metadata=_plain_metadata(session.metadata),
        )


def _stripe_message(exc: stripe.StripeError) -> str:
    return exc.user_message or str(exc) or "Stripe request failed"


def _plain_metadata(metadata: object) -> dict[str, str]:
    if metadata is None:
        return {}
    if hasattr(metadata, "to_dict"):
        metadata = metadata.to_dict()
    return {str(key): str(value) for key, value in dict(metadata).items()}
