"""Shared test fixtures."""

from dataclasses import dataclass, field
from io import BytesIO

import pytest
from PIL import Image

from artzyful.config import Settings
from artzyful.containers import AppContainer
from artzyful.domain.checkout import CheckoutSession, Product, SessionDetails
from artzyful.domain.errors import ProviderError
from artzyful.services.catalog import CatalogService, ConfigStore
from artzyful.services.checkout import CheckoutService, PaymentGateway
from artzyful.services.generation import GenerationService, ImageEditClient
from artzyful.services.image_reducer import ImageSizeReducer
from artzyful.services.printing import ImageFetcher, PrintService


@dataclass
class InMemoryConfigStore(ConfigStore):
    """In-memory config store for tests."""

    records: dict[str, dict[str, object]] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get(self, key: str) -> dict[str, object] | None:
        record = self.records.get(key)
        return dict(record) if record is not None else None

    def put(self, key: str, value: dict[str, object]) -> None:
        self.writes.append(key)
        self.records[key] = dict(value)


@dataclass
class FakePaymentGateway(PaymentGateway):
    """Fake payment gateway that records created sessions."""

    created: list[dict[str, object]] = field(default_factory=list)
    sessions: dict[str, SessionDetails] = field(default_factory=dict)

    async def create_session(
        self,
        *,
        product: Product,
        currency: str,
        metadata: dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        session_id = f"cs_test_{len(self.created) + 1}"
        self.created.append(
            {
                "id": session_id,
                "product": product,
                "currency": currency,
                "metadata": metadata,
                "success_url": success_url,
                "cancel_url": cancel_url,
            }
        )
        return CheckoutSession(
            id=session_id, url=f"https://checkout.test/pay/{session_id}"
        )

    async def retrieve_session(self, session_id: str) -> SessionDetails | None:
        return self.sessions.get(session_id)


@dataclass
class FakeImageEditClient(ImageEditClient):
    """Fake image-edit client that records calls and can fail on a prompt."""

    model: str = "fake-model"
    calls: list[tuple[str, str]] = field(default_factory=list)
    fail_on_call: int | None = None

    async def edit(self, *, image_url: str, prompt: str) -> str:
        self.calls.append((image_url, prompt))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise ProviderError("provider exploded")
        return f"https://cdn.test/generated/{len(self.calls)}.png"


@dataclass
class FakeImageFetcher(ImageFetcher):
    """Fake fetcher returning static bytes."""

    content: bytes = b""
    error: Exception | None = None
    fetched: list[str] = field(default_factory=list)

    async def fetch(self, image_url: str) -> bytes:
        self.fetched.append(image_url)
        if self.error is not None:
            raise self.error
        return self.content


def make_image_bytes(size: tuple[int, int], image_format: str = "BMP") -> bytes:
    """Encode a smooth gradient image of the given size."""
    gradient = Image.linear_gradient("L").resize(size)
    image = Image.merge("RGB", (gradient, gradient, Image.new("L", size, 90)))
    out = BytesIO()
    image.save(out, format=image_format)
    return out.getvalue()


def make_corrupt_png(size: tuple[int, int]) -> bytes:
    """Encode a PNG whose first IDAT chunk declares half its real length."""
    data = bytearray(make_image_bytes(size, "PNG"))
    length_at = data.index(b"IDAT") - 4
    length = int.from_bytes(data[length_at : length_at + 4], "big")
    data[length_at : length_at + 4] = (length // 2).to_bytes(4, "big")
    return bytes(data)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        stripe_secret_key="sk_test_key",
        admin_token="admin-token",
        fal_key="fal-key",
    )


@pytest.fixture
def config_store() -> InMemoryConfigStore:
    return InMemoryConfigStore()


@pytest.fixture
def catalog_service(config_store: InMemoryConfigStore) -> CatalogService:
    return CatalogService(config_store)


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def image_client() -> FakeImageEditClient:
    return FakeImageEditClient()


@pytest.fixture
def image_fetcher() -> FakeImageFetcher:
    return FakeImageFetcher(content=make_image_bytes((300, 200), "PNG"))


@pytest.fixture
def checkout_service(
    settings: Settings, payment_gateway: FakePaymentGateway
) -> CheckoutService:
    return CheckoutService(
        gateway=payment_gateway,
        reducer=ImageSizeReducer(),
        success_url=settings.success_url,
        cancel_url=settings.cancel_url,
        metadata_max_length=settings.metadata_max_length,
    )


@pytest.fixture
def generation_service(
    image_client: FakeImageEditClient, catalog_service: CatalogService
) -> GenerationService:
    return GenerationService(client=image_client, catalog=catalog_service)


@pytest.fixture
def container(
    settings: Settings,
    catalog_service: CatalogService,
    checkout_service: CheckoutService,
    generation_service: GenerationService,
    image_fetcher: FakeImageFetcher,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        checkout_service=checkout_service,
        generation_service=generation_service,
        print_service=PrintService(image_fetcher),
        close_resources=close_resources,
    )
