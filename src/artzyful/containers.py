"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from artzyful.adapters.fal_image_edit_client import HttpxFalImageEditClient
from artzyful.adapters.http_image_fetcher import HttpxImageFetcher
from artzyful.adapters.json_file_config_store import JsonFileConfigStore
from artzyful.adapters.openai_image_edit_client import OpenAIImageEditClient
from artzyful.adapters.stripe_payment_gateway import StripePaymentGateway
from artzyful.adapters.supabase_config_store import SupabaseConfigStore
from artzyful.config import Settings
from artzyful.services.catalog import CatalogService, ConfigStore
from artzyful.services.checkout import CheckoutService
from artzyful.services.generation import GenerationService, ImageEditClient
from artzyful.services.image_reducer import ImageSizeReducer
from artzyful.services.printing import PrintService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    checkout_service: CheckoutService
    generation_service: GenerationService
    print_service: PrintService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_service = CatalogService(_build_config_store(resolved_settings))
    reducer = ImageSizeReducer(
        max_width=resolved_settings.thumbnail_max_width,
        quality=resolved_settings.thumbnail_quality,
    )
    checkout_service = CheckoutService(
        gateway=StripePaymentGateway.create(resolved_settings.stripe_secret_key),
        reducer=reducer,
        success_url=resolved_settings.success_url,
        cancel_url=resolved_settings.cancel_url,
        currency=resolved_settings.currency,
        metadata_max_length=resolved_settings.metadata_max_length,
    )
    fetcher = HttpxImageFetcher.create()
    image_client, close_image_client = _build_image_client(resolved_settings, fetcher)
    generation_service = GenerationService(
        client=image_client,
        catalog=catalog_service,
    )
    print_service = PrintService(fetcher)

    async def close_resources() -> None:
        await close_image_client()
        await fetcher.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        checkout_service=checkout_service,
        generation_service=generation_service,
        print_service=print_service,
        close_resources=close_resources,
    )


def _build_config_store(settings: Settings) -> ConfigStore:
    if settings.config_backend == "file":
        return JsonFileConfigStore(Path(settings.data_dir))
    if settings.config_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase config backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseConfigStore(client)
    raise ValueError(f"Unknown config backend: {settings.config_backend}")


def _build_image_client(
    settings: Settings, fetcher: HttpxImageFetcher
) -> tuple[ImageEditClient, Callable[[], Awaitable[None]]]:
    if settings.image_provider == "fal":
        if not settings.fal_key:
            raise ValueError("FAL_KEY is required for the fal image provider")
        fal_client = HttpxFalImageEditClient.create(
            api_key=settings.fal_key,
            base_url=settings.fal_base_url,
            model=settings.fal_model,
            guidance_scale=settings.fal_guidance_scale,
        )
        return fal_client, fal_client.close
    if settings.image_provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai image provider")
        openai_client = OpenAIImageEditClient.create(
            api_key=settings.openai_api_key,
            fetcher=fetcher,
            model=settings.openai_image_model,
        )
        return openai_client, openai_client.client.close
    raise ValueError(f"Unknown image provider: {settings.image_provider}")
