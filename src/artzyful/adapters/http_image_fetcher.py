"""Image download client."""

from dataclasses import dataclass

import httpx

from artzyful.services.image_reducer import decode_data_url
from artzyful.services.printing import ImageFetcher


@dataclass
class HttpxImageFetcher(ImageFetcher):
    """Downloads images over HTTP, decoding data URLs in place."""

    http_client: httpx.AsyncClient

    @classmethod
    def create(cls) -> "HttpxImageFetcher":
        """Create a fetcher with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(follow_redirects=True))

    async def fetch(self, image_url: str) -> bytes:
        """Return the image bytes behind a URL."""
        if image_url.startswith("data:"):
            return decode_data_url(image_url)
        response = await self.http_client.get(image_url, timeout=30)
        response.raise_for_status()
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
