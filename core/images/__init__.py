"""Text-to-image generation client.

Sends prompts to a remote image-generation API (ModelScope by default) and
returns image URLs.

Example:
    from core.images import generate_image

    url = await generate_image("modern product showcase, clean design")

Environment Variables:
    AIPIC_API_KEY: Bearer token for the API (or MODELSCOPE_API_KEY)
    AIPIC_MODEL_ID / AIPIC_BASE_URL: Override model and endpoint
"""

from .config import DEFAULT_BASE_URL, DEFAULT_MODEL, ImageGenConfig, get_image_config
from .errors import (
    ImageAPIError,
    ImageConnectionError,
    ImageError,
    MalformedResponseError,
    NotConfiguredError,
)
from .service import ImageGenerationService, get_image_service, set_image_service
from .types import (
    ImageConfigStatus,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageGenerationResult,
)


async def generate_image(prompt: str, model: str | None = None) -> str:
    """Generate one image with the global service.

    Raises:
        NotConfiguredError: No service configured yet
        ImageError: Any API failure
    """
    service = get_image_service()
    if service is None:
        raise NotConfiguredError("Image generation service not configured")
    return await service.generate_image(ImageGenerationRequest(prompt=prompt, model=model))


__all__ = [
    # Main function
    "generate_image",
    # Service
    "ImageGenerationService",
    "get_image_service",
    "set_image_service",
    # Types
    "ImageGenerationRequest",
    "ImageGenerationResponse",
    "ImageGenerationResult",
    "ImageConfigStatus",
    # Config
    "ImageGenConfig",
    "get_image_config",
    "DEFAULT_MODEL",
    "DEFAULT_BASE_URL",
    # Errors
    "ImageError",
    "ImageAPIError",
    "ImageConnectionError",
    "MalformedResponseError",
    "NotConfiguredError",
]
