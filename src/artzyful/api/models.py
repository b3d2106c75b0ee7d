"""Request bodies accepted by the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CheckoutRequest(_CamelModel):
    """Order placed from the style picker."""

    image_url: str | None = Field(default=None, alias="imageUrl")
    style: str | None = None
    product_type: str | None = Field(default=None, alias="productType")


class SessionRequest(_CamelModel):
    """Reference to a checkout session."""

    session_id: str | None = Field(default=None, alias="sessionId")


class EditImageRequest(_CamelModel):
    """Single style generation request."""

    image_url: str | None = Field(default=None, alias="imageUrl")
    style: str | None = None


class PrintRequest(_CamelModel):
    """Print preparation request."""

    image_url: str | None = Field(default=None, alias="imageUrl")
    orientation: str | None = None


class AdminUpdateRequest(_CamelModel):
    """Wholesale overwrite of prompts and/or site content."""

    prompts: dict[str, object] | None = None
    site_content: dict[str, object] | None = Field(default=None, alias="siteContent")
