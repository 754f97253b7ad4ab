"""Image generation providers (OpenAI and OpenRouter)."""

import json
from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException, Timeout
from loguru import logger

from app.config import Settings
from app.errors import ConfigurationError, TransportError, UpstreamError
from app.models.generation import GenerationRequest, GenerationResult
from app.services.session import is_success


class ImageProvider:
    """Base provider for OpenAI-style image generation APIs."""

    name = "Image provider"

    def __init__(
        self,
        session: AsyncSession,
        api_key: str,
        model: str,
        endpoint: str,
        size: str = "1024x1024",
        quality: str = "standard",
        timeout: int = 120,
        proxy: str | None = None,
    ):
        self.session = session
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint
        self.size = size
        self.quality = quality
        self.timeout = timeout
        self.proxy = proxy

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Generate a single image for the given prompt.

        Args:
            prompt: Text prompt for the image

        Returns:
            GenerationResult with the image URL and the provider-revised prompt

        Raises:
            UpstreamError: The provider answered with a non-success status
            TransportError: The provider could not be reached
        """
        request = GenerationRequest(prompt=prompt)
        body = self._build_request_body(request)

        logger.info(f"Requesting image from {self.name} (model: {self.model})")
        data = await self._call_api(body)
        return self._build_result(data)

    def extra_headers(self) -> dict[str, str]:
        """Provider specific headers added to every request."""
        return {}

    async def _call_api(self, body: dict) -> dict:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            **self.extra_headers(),
        }

        try:
            response = await self.session.post(
                url=self.endpoint,
                headers=headers,
                json=body,
                timeout=self.timeout,
                proxy=self.proxy,
            )
        except Timeout as e:
            logger.error(f"{self.name} request timeout: {e}")
            raise TransportError(self.name, "Request timeout") from e
        except RequestException as e:
            logger.error(f"{self.name} request failed: {e}")
            raise TransportError(self.name, str(e)) from e

        if not is_success(response.status_code):
            logger.error(
                f"{self.name} request failed - status: {response.status_code}, "
                f"response: {response.text[:1024]}"
            )
            raise UpstreamError(self.name, response.status_code, response.text)

        try:
            return response.json()
        except json.JSONDecodeError as e:
            logger.error(
                f"JSON decode error: {e}, response text: {response.text[:500] if response.text else 'empty'}"
            )
            raise UpstreamError(self.name, response.status_code, "Invalid JSON response") from e

    def _build_request_body(self, request: GenerationRequest) -> dict:
        return {
            "model": self.model,
            "prompt": request.prompt,
            "n": 1,
            "size": self.size,
            "quality": self.quality,
        }

    def _build_result(self, data: dict) -> GenerationResult:
        items = data.get("data") or []
        if not items or not items[0].get("url"):
            logger.warning(f"{self.name} request succeeded but no image in response")
            raise UpstreamError(self.name, 200, "No image URL in response")

        item = items[0]
        return GenerationResult(
            image_url=item["url"],
            revised_prompt=item.get("revised_prompt"),
        )


class OpenAIImageProvider(ImageProvider):
    """Provider for the OpenAI DALL-E API."""

    name = "OpenAI"


class OpenRouterImageProvider(ImageProvider):
    """Provider for the OpenRouter image API."""

    name = "OpenRouter"

    def __init__(
        self,
        session: AsyncSession,
        api_key: str,
        model: str,
        endpoint: str,
        size: str = "1024x1024",
        quality: str = "standard",
        timeout: int = 120,
        proxy: str | None = None,
        referer: str = "",
        title: str = "",
    ):
        super().__init__(
            session,
            api_key=api_key,
            model=model,
            endpoint=endpoint,
            size=size,
            quality=quality,
            timeout=timeout,
            proxy=proxy,
        )
        self.referer = referer
        self.title = title

    def extra_headers(self) -> dict[str, str]:
        return {
            "HTTP-Referer": self.referer,
            "X-Title": self.title,
        }


def create_image_provider(settings: Settings, session: AsyncSession) -> ImageProvider:
    """
    Create the image provider selected by IMAGE_API_PROVIDER.

    Anything other than "openrouter" falls back to OpenAI.

    Raises:
        ConfigurationError: The API key for the selected provider is missing
    """
    common = {
        "size": settings.image_size,
        "quality": settings.image_quality,
        "timeout": settings.timeout,
        "proxy": settings.proxy,
    }

    if settings.image_api_provider.lower() == "openrouter":
        if not settings.openrouter_api_key:
            raise ConfigurationError(
                "OPENROUTER_API_KEY must be configured when using OpenRouter"
            )
        return OpenRouterImageProvider(
            session,
            api_key=settings.openrouter_api_key,
            model=settings.openrouter_model,
            endpoint=f"{settings.openrouter_base_api}/images/generations",
            referer=settings.openrouter_referer,
            title=settings.openrouter_title,
            **common,
        )

    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY must be configured when using OpenAI")
    return OpenAIImageProvider(
        session,
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        endpoint=f"{settings.openai_base_api}/images/generations",
        **common,
    )
