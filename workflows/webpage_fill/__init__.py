"""Webpage fill: analyze → prompt → generate → splice.

Example:
    from core.images import ImageGenConfig, ImageGenerationService
    from workflows.webpage_fill import process_webpage

    async with ImageGenerationService(ImageGenConfig(api_key="...")) as service:
        result = await process_webpage(html, service, {"maxImages": 3})
    print(result.modified_content)
"""

from .pipeline import process_webpage
from .splice import build_img_tag, fill_images_into_html
from .types import FilledImage, WebpageFillResult

__all__ = [
    "process_webpage",
    "fill_images_into_html",
    "build_img_tag",
    "FilledImage",
    "WebpageFillResult",
]
