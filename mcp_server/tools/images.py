"""Image generation tools: configure the API and generate images."""

import logging
from dataclasses import replace
from typing import Any

from mcp.types import Tool

from core.images import (
    ImageGenerationRequest,
    ImageGenerationService,
    get_image_config,
    get_image_service,
    set_image_service,
)

from ..errors import ServiceNotConfiguredError, ToolError, ValidationError
from ..response_utils import preview
from ..validation_utils import require_str

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 5


def get_tools() -> list[Tool]:
    """Get image generation tools."""
    return [
        Tool(
            name="configure-api",
            description=(
                "Configure the image generation API key (and optionally model and "
                "endpoint). The key is checked by generating one test image."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "apiKey": {
                        "type": "string",
                        "description": "API key for the image generation service",
                    },
                    "modelId": {
                        "type": "string",
                        "description": "Model id (default: FLUX model)",
                    },
                    "baseUrl": {
                        "type": "string",
                        "description": "Image generation endpoint URL",
                    },
                },
                "required": ["apiKey"],
                "additionalProperties": False,
            },
        ),
        Tool(
            name="generate-images",
            description=(
                "Generate one image per English prompt. Requests run concurrently; "
                "each result carries either an imageUrl or an error."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "prompts": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "English prompts",
                    },
                    "batchSize": {
                        "type": "integer",
                        "minimum": 1,
                        "default": DEFAULT_BATCH_SIZE,
                        "description": "Maximum concurrent requests",
                    },
                },
                "required": ["prompts"],
                "additionalProperties": False,
            },
        ),
    ]


async def handle(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle image generation tool calls."""
    if name == "configure-api":
        return await _configure_api(arguments)

    elif name == "generate-images":
        return await _generate_images(arguments)

    else:
        raise ToolError(f"Unknown image tool: {name}")


async def _configure_api(arguments: dict[str, Any]) -> dict[str, Any]:
    base = get_image_config()
    config = replace(
        base,
        api_key=require_str(arguments, "apiKey"),
        model_id=arguments.get("modelId") or base.model_id,
        base_url=arguments.get("baseUrl") or base.base_url,
    )
    service = ImageGenerationService(config)

    if not await service.validate_config():
        await service.close()
        raise ToolError(
            "API configuration check failed. Verify the API key, model id and endpoint URL.",
            {"model": config.model_id, "base_url": config.base_url},
        )

    previous = get_image_service()
    if previous is not None and previous is not service:
        await previous.close()
    set_image_service(service)
    logger.info(f"Image API configured (model {config.model_id})")

    return {
        "configured": True,
        "message": "API configured. Image generation is ready.",
        "status": service.get_config_status().model_dump(by_alias=True),
    }


async def _generate_images(arguments: dict[str, Any]) -> dict[str, Any]:
    service = get_image_service()
    if service is None or not service.config.has_api_key:
        raise ServiceNotConfiguredError("generate-images")

    prompts = arguments.get("prompts")
    if not isinstance(prompts, list) or not all(isinstance(p, str) for p in prompts):
        raise ValidationError("prompts", "an array of strings is required")

    batch_size = arguments.get("batchSize", DEFAULT_BATCH_SIZE)
    if not isinstance(batch_size, int) or batch_size < 1:
        raise ValidationError("batchSize", "must be a positive integer")

    results = await service.generate_images(
        [ImageGenerationRequest(prompt=p) for p in prompts],
        batch_size=batch_size,
    )

    succeeded = sum(1 for r in results if r.succeeded)
    return {
        "summary": f"Generated {succeeded} images, {len(results) - succeeded} failed",
        "results": [
            {
                "prompt": preview(r.prompt, 50),
                "imageUrl": r.image_url,
                **({"error": r.error} if r.error else {}),
            }
            for r in results
        ],
    }
