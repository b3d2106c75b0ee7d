"""Domain errors mapped to HTTP responses by the API layer."""


class ArtzyfulError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status_code = 500


class InvalidRequestError(ArtzyfulError):
    """Required fields are missing or malformed."""

    status_code = 400


class UnknownStyleError(InvalidRequestError):
    """Style identifier is not part of the catalog."""

    def __init__(self, style: str) -> None:
        super().__init__(f"Unknown style: {style}")
        self.style = style


class UnknownProductError(InvalidRequestError):
    """Product type is not sold."""

    def __init__(self, product_type: str) -> None:
        super().__init__('Invalid productType. Use "single" or "bundle"')
        self.product_type = product_type


class PaymentRequiredError(ArtzyfulError):
    """Checkout session has not been paid."""

    status_code = 402


class SessionNotFoundError(ArtzyfulError):
    """Checkout session does not exist at the payment provider."""

    status_code = 404

    def __init__(self, session_id: str) -> None:
        super().__init__("Session not found")
        self.session_id = session_id


class ProviderError(ArtzyfulError):
    """An external provider failed or returned an unusable response."""

    status_code = 500


class ImageProcessingError(ArtzyfulError):
    """An image could not be decoded or re-encoded."""

    status_code = 500
