"""End-to-end flow: analyze a webpage, generate images, splice them in."""

import logging

from core.images.service import ImageGenerationService
from core.images.types import ImageGenerationRequest
from workflows.content_analysis import analyze_webpage
from workflows.prompt_synthesis import WebpageFillConfig, generate_prompts

from .splice import fill_images_into_html
from .types import WebpageFillResult

logger = logging.getLogger(__name__)


async def process_webpage(
    html_content: str,
    service: ImageGenerationService,
    config: WebpageFillConfig | dict | None = None,
) -> WebpageFillResult:
    """Fill a webpage's image slots with generated images.

    At most ``config.max_images`` placeholders are processed, in analysis
    order. Image failures are isolated per placeholder: failed slots are
    left untouched and reported in ``message``.
    """
    if not isinstance(config, WebpageFillConfig):
        config = WebpageFillConfig.model_validate(config or {})

    analysis = analyze_webpage(html_content)
    placeholders = analysis.placeholders[: config.max_images]

    if not placeholders:
        logger.info("No image locations found in webpage")
        return WebpageFillResult(
            original_content=html_content,
            modified_content=html_content,
            message="No locations needing images were found in the webpage",
        )

    prompt_results = generate_prompts(placeholders, config)
    image_results = await service.generate_images(
        [ImageGenerationRequest(prompt=r.prompt) for r in prompt_results]
    )

    result = fill_images_into_html(html_content, placeholders, image_results)

    failed = len(placeholders) - len(result.generated_images)
    logger.info(
        f"Webpage fill: {len(result.generated_images)} images generated, {failed} failed"
    )
    if failed:
        result.message = (
            f"Generated {len(result.generated_images)} of {len(placeholders)} images; "
            f"{failed} failed"
        )
    return result
