"""Text-to-image API client with independent batch fan-out."""

import logging
from dataclasses import replace

import httpx
from pydantic import ValidationError

from core.utils.async_context import AsyncContextManager
from core.utils.async_http_client import register_cleanup
from core.utils.http_errors import safe_http_request
from workflows.shared.async_utils import run_with_concurrency

from .config import ImageGenConfig, get_image_config
from .errors import (
    ImageAPIError,
    ImageConnectionError,
    ImageError,
    MalformedResponseError,
    NotConfiguredError,
)
from .types import (
    ImageConfigStatus,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageGenerationResult,
)

logger = logging.getLogger(__name__)

PROVIDER = "modelscope"
VALIDATION_PROMPT = "A simple test image"


class ImageGenerationService(AsyncContextManager):
    """Client for an OpenAI-style ``/images/generations`` endpoint.

    Usage:
        service = ImageGenerationService(ImageGenConfig(api_key="..."))
        url = await service.generate_image(ImageGenerationRequest(prompt="a red fox"))

        # Batch: every request settles on its own
        results = await service.generate_images(
            [ImageGenerationRequest(prompt=p) for p in prompts],
            batch_size=5,
        )
    """

    def __init__(self, config: ImageGenConfig | None = None):
        self._config = config or get_image_config()
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> ImageGenConfig:
        return self._config

    def update_config(self, **changes) -> None:
        """Replace configuration fields (api_key, model_id, base_url, ...)."""
        self._config = replace(self._config, **changes)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._config.timeout)
        return self._client

    async def generate_image(self, request: ImageGenerationRequest) -> str:
        """Generate one image and return its URL.

        Raises:
            NotConfiguredError: No API key configured
            ImageAPIError: Non-2xx response
            ImageConnectionError: Network failure or timeout
            MalformedResponseError: Response has no image
        """
        if not self._config.has_api_key:
            raise NotConfiguredError(
                "Image API key not configured. Call configure-api or set AIPIC_API_KEY.",
                provider=PROVIDER,
            )

        client = await self._get_client()
        payload = {
            "model": request.model or self._config.model_id,
            "prompt": request.prompt,
        }

        logger.info(f"Generating image for prompt: {request.prompt[:80]!r}")
        response = await safe_http_request(
            client,
            "POST",
            self._config.base_url,
            status_error=ImageAPIError,
            connection_error=ImageConnectionError,
            json=payload,
            headers={
                "Authorization": f"Bearer {self._config.api_key}",
                "Content-Type": "application/json",
            },
        )

        try:
            body = ImageGenerationResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise MalformedResponseError(
                f"Unreadable response from image API: {e}", provider=PROVIDER
            ) from e

        if not body.images:
            raise MalformedResponseError(
                "Image API response contains no generated images", provider=PROVIDER
            )

        image_url = body.images[0].url
        logger.info(f"Generated image: {image_url}")
        return image_url

    async def generate_images(
        self,
        requests: list[ImageGenerationRequest],
        batch_size: int | None = None,
    ) -> list[ImageGenerationResult]:
        """Generate images with bounded concurrency.

        One failure never aborts the others: the result list has one entry
        per request, in request order, and failed entries carry ``error``
        with an empty ``image_url``.
        """
        limit = max(1, batch_size or self._config.batch_size)
        logger.info(f"Generating {len(requests)} images (batch size {limit})")

        outcomes = await run_with_concurrency(
            [self.generate_image(r) for r in requests],
            max_concurrent=limit,
            return_exceptions=True,
        )

        results = []
        for index, (request, outcome) in enumerate(zip(requests, outcomes)):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning(f"Image {index + 1}/{len(requests)} failed: {outcome}")
                message = outcome.message if isinstance(outcome, ImageError) else str(outcome)
                results.append(
                    ImageGenerationResult(
                        prompt=request.prompt, image_url="", error=message or "Unknown error"
                    )
                )
            else:
                results.append(ImageGenerationResult(prompt=request.prompt, image_url=outcome))
        return results

    async def validate_config(self) -> bool:
        """Check the credentials by generating one test image."""
        try:
            await self.generate_image(ImageGenerationRequest(prompt=VALIDATION_PROMPT))
            return True
        except ImageError as e:
            logger.error(f"Image API configuration check failed: {e}")
            return False

    def get_config_status(self) -> ImageConfigStatus:
        return ImageConfigStatus(
            has_api_key=self._config.has_api_key,
            model=self._config.model_id,
            base_url=self._config.base_url,
        )

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None


# Module singleton
_service: ImageGenerationService | None = None


def get_image_service() -> ImageGenerationService | None:
    """Get the configured global service, or None before configuration."""
    return _service


def set_image_service(service: ImageGenerationService) -> ImageGenerationService:
    """Install ``service`` as the global client (replacing any previous one)."""
    global _service
    first = _service is None
    _service = service
    if first:
        register_cleanup("ImageGenerationService", _close_image_service)
    return service


async def _close_image_service() -> None:
    """Close the global ImageGenerationService."""
    global _service
    if _service:
        await _service.close()
        _service = None
