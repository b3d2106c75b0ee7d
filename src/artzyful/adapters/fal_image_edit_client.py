"""fal.ai image-edit client."""

from dataclasses import dataclass

import httpx

from artzyful.domain.errors import ProviderError
from artzyful.services.generation import ImageEditClient


@dataclass
class HttpxFalImageEditClient(ImageEditClient):
    """Calls a fal.ai model through its synchronous REST endpoint."""

    api_key: str
    base_url: str
    model: str
    guidance_scale: float
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, base_url: str, model: str, guidance_scale: float
    ) -> "HttpxFalImageEditClient":
        """Create a fal.ai client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            model=model,
            guidance_scale=guidance_scale,
            http_client=httpx.AsyncClient(),
        )

    async def edit(self, *, image_url: str, prompt: str) -> str:
        """Run the model and return the first generated image URL."""
        try:
            response = await self.http_client.post(
                f"{self.base_url}/{self.model}",
                headers={"Authorization": f"Key {self.api_key}"},
                json={
                    "prompt": prompt,
                    "image_url": image_url,
                    "guidance_scale": self.guidance_scale,
                },
                timeout=120,
            )
        except httpx.HTTPError as exc:
            raise ProviderError(f"fal.ai request failed: {exc}") from exc
        if response.is_error:
            raise ProviderError(_error_message(response))
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("fal.ai returned a malformed response") from exc
        generated_url = _first_image_url(payload)
        if not generated_url:
            raise ProviderError("No image URL returned from fal.ai")
        return generated_url

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"fal.ai request failed ({response.status_code})"
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, str):
        return detail
    if detail:
        return str(detail)
    return f"fal.ai request failed ({response.status_code})"


def _first_image_url(payload: object) -> str | None:
    images = payload.get("images") if isinstance(payload, dict) else None
    if not isinstance(images, list) or not images:
        return None
    first = images[0]
    url = first.get("url") if isinstance(first, dict) else None
    return url if isinstance(url, str) else None
