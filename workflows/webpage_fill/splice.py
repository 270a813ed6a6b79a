"""Splice generated image URLs back into HTML.

Best effort, string based:
- a placeholder whose selector mentions ``img`` replaces the n-th ``<img>``
  tag of the original document, n being the placeholder's index;
- any other placeholder with a section tag gets the image inserted before
  the first closing tag of that section.
Nested or repeated tags can defeat this; the generated image is still
reported in the result.
"""

import html
import logging
import re

from core.images.types import ImageGenerationResult
from workflows.content_analysis.types import ImagePlaceholder

from .types import FilledImage, WebpageFillResult

logger = logging.getLogger(__name__)

_IMG_TAG = re.compile(r"<img[^>]*>", re.IGNORECASE)

DEFAULT_ALT = "AI generated image"


def build_img_tag(image_url: str, alt: str | None = None) -> str:
    """Responsive ``<img>`` tag for a generated image."""
    return (
        f'<img src="{html.escape(image_url, quote=True)}" '
        f'alt="{html.escape(alt or DEFAULT_ALT, quote=True)}" '
        'style="max-width: 100%; height: auto;" />'
    )


def fill_images_into_html(
    html_content: str,
    placeholders: list[ImagePlaceholder],
    image_results: list[ImageGenerationResult],
) -> WebpageFillResult:
    """Insert successful images into ``html_content``.

    ``image_results`` must be index-aligned with ``placeholders``; failed
    results are skipped.
    """
    modified = html_content
    original_tags = _IMG_TAG.findall(html_content)
    filled = []

    for index, placeholder in enumerate(placeholders):
        if index >= len(image_results) or not image_results[index].succeeded:
            continue
        result = image_results[index]
        position = placeholder.position

        if position.selector:
            tag = build_img_tag(result.image_url, placeholder.alt)
            if "img" in position.selector:
                if index < len(original_tags):
                    modified = modified.replace(original_tags[index], tag, 1)
                else:
                    logger.debug(f"No <img> #{index} to replace for {placeholder.id}")
            elif position.section:
                insert_at = modified.find(f"</{position.section}>")
                if insert_at > -1:
                    modified = modified[:insert_at] + tag + modified[insert_at:]
                else:
                    logger.debug(f"No </{position.section}> found for {placeholder.id}")

        filled.append(
            FilledImage(placeholder=placeholder, image_url=result.image_url, prompt=result.prompt)
        )

    return WebpageFillResult(
        original_content=html_content,
        modified_content=modified,
        generated_images=filled,
    )
