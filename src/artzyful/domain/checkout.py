"""Checkout domain models."""

from dataclasses import dataclass

SINGLE = "single"
BUNDLE = "bundle"


@dataclass(frozen=True)
class Product:
    """Purchasable product shown as a single checkout line item."""

    product_type: str
    name: str
    description: str
    unit_amount: int


PRODUCTS: dict[str, Product] = {
    SINGLE: Product(
        product_type=SINGLE,
        name="Bougie Pet Portrait",
        description="One AI-generated pet portrait in your chosen style",
        unit_amount=1200,
    ),
    BUNDLE: Product(
        product_type=BUNDLE,
        name="Bougie Bundle (All 3 Styles)",
        description="Three AI-generated pet portraits in all available styles",
        unit_amount=2400,
    ),
}


@dataclass(frozen=True)
class CheckoutSession:
    """Hosted checkout session created at the payment provider."""

    id: str
    url: str | None


@dataclass(frozen=True)
class SessionDetails:
    """Checkout session read back after the customer returns."""

    id: str
    payment_status: str
    amount_total: int | None
    metadata: dict[str, str]

    @property
    def is_paid(self) -> bool:
        return self.payment_status == "paid"
