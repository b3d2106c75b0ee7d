"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    stripe_secret_key: str
    admin_token: str
    image_provider: str = "fal"
    fal_key: str | None = None
    fal_base_url: str = "https://fal.run"
    fal_model: str = "fal-ai/flux-pro/kontext"
    fal_guidance_scale: float = 3.5
    openai_api_key: str | None = None
    openai_image_model: str = "gpt-image-1"
    public_base_url: str = "https://artzyful.com"
    cancel_path: str = "/pet-styles.html"
    currency: str = "usd"
    config_backend: str = "file"
    data_dir: str = "data"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    metadata_max_length: int = 500
    thumbnail_max_width: int = 200
    thumbnail_quality: int = 60
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def success_url(self) -> str:
        """Checkout return URL; Stripe fills in the session id placeholder."""
        return f"{self.public_base_url}/success?session_id={{CHECKOUT_SESSION_ID}}"

    @property
    def cancel_url(self) -> str:
        return f"{self.public_base_url}{self.cancel_path}"
