"""One-shot webpage processing tool."""

import logging
from dataclasses import replace
from typing import Any

from mcp.types import Tool

from core.images import ImageGenerationService, get_image_config, get_image_service
from workflows.prompt_synthesis import WebpageFillConfig
from workflows.prompt_synthesis.config import QUALITIES, STYLES
from workflows.webpage_fill import process_webpage

from ..errors import ToolError
from ..validation_utils import parse_model, require_str

logger = logging.getLogger(__name__)


def get_tools() -> list[Tool]:
    """Get webpage processing tools."""
    return [
        Tool(
            name="process-webpage-complete",
            description=(
                "Process a webpage end to end: analyze it, generate prompts and images, "
                "and return the HTML with the generated images inserted."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "htmlContent": {
                        "type": "string",
                        "description": "Original HTML content",
                    },
                    "apiKey": {
                        "type": "string",
                        "description": "API key for the image generation service",
                    },
                    "config": {
                        "type": "object",
                        "properties": {
                            "style": {"type": "string", "enum": list(STYLES)},
                            "quality": {"type": "string", "enum": list(QUALITIES)},
                            "maxImages": {
                                "type": "integer",
                                "minimum": 1,
                                "default": 10,
                                "description": "Maximum number of images to generate",
                            },
                        },
                    },
                },
                "required": ["htmlContent", "apiKey"],
                "additionalProperties": False,
            },
        ),
    ]


async def handle(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle webpage processing tool calls."""
    if name != "process-webpage-complete":
        raise ToolError(f"Unknown webpage tool: {name}")

    html_content = require_str(arguments, "htmlContent")
    api_key = require_str(arguments, "apiKey")
    config = parse_model(WebpageFillConfig, arguments.get("config") or {}, "config")

    # Reuse the configured model/endpoint but always the key given for this call
    configured = get_image_service()
    base = configured.config if configured is not None else get_image_config()

    async with ImageGenerationService(replace(base, api_key=api_key)) as service:
        result = await process_webpage(html_content, service, config)

    logger.info(
        f"process-webpage-complete: {len(result.generated_images)} images spliced "
        f"(max {config.max_images})"
    )
    return result.to_wire()
