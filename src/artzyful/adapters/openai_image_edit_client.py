"""OpenAI Images API client for style edits."""

from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from artzyful.domain.errors import ProviderError
from artzyful.services.generation import ImageEditClient
from artzyful.services.image_reducer import detect_mime_type
from artzyful.services.printing import ImageFetcher


@dataclass
class OpenAIImageEditClient(ImageEditClient):
    """Image-edit client backed by the OpenAI Images API."""

    client: AsyncOpenAI
    fetcher: ImageFetcher
    model: str

    @classmethod
    def create(
        cls, api_key: str, fetcher: ImageFetcher, model: str
    ) -> "OpenAIImageEditClient":
        """Create an OpenAI image-edit client."""
        return cls(client=AsyncOpenAI(api_key=api_key), fetcher=fetcher, model=model)

    async def edit(self, *, image_url: str, prompt: str) -> str:
        """Edit the source image and return the result as a data URL."""
        source = await self.fetcher.fetch(image_url)
        mime_type = detect_mime_type(source)
        extension = mime_type.split("/", maxsplit=1)[1]
        try:
            response = await self.client.images.edit(
                model=self.model,
                image=(f"source.{extension}", source, mime_type),
                prompt=prompt,
            )
        except OpenAIError as exc:
            raise ProviderError(str(exc)) from exc
        data = response.data or []
        encoded = data[0].b64_json if data else None
        if not encoded:
            raise ProviderError("OpenAI returned no image data")
        return f"data:image/png;base64,{encoded}"
