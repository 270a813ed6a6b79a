"""MCP resources: server status and example prompts."""

import json
from typing import Any

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource

from core.images import get_image_service
from workflows.prompt_synthesis import sample_prompts

from .errors import ToolError

SERVER_NAME = "aipic-server"
SERVER_VERSION = "1.0.0"

STATUS_URI = "aipic://status"
SAMPLE_PROMPTS_URI = "aipic://sample-prompts"


def get_resources() -> list[Resource]:
    """List the static resources."""
    return [
        Resource(
            uri=STATUS_URI,
            name="status",
            description="Current status of the AIPIC services",
            mimeType="application/json",
        ),
        Resource(
            uri=SAMPLE_PROMPTS_URI,
            name="sample-prompts",
            description="Example English prompts for AI image generation",
            mimeType="application/json",
        ),
    ]


def server_status() -> dict[str, Any]:
    """Snapshot of which services are usable."""
    service = get_image_service()
    configured = service is not None and service.config.has_api_key
    status: dict[str, Any] = {
        "server": f"{SERVER_NAME} v{SERVER_VERSION}",
        "apiConfigured": configured,
        "services": {
            "contentAnalysis": "available",
            "promptGeneration": "available",
            "imageGeneration": "configured" if configured else "requires API key (configure-api)",
        },
        "supportedFeatures": [
            "webpage content analysis",
            "article content analysis",
            "English prompt generation",
            "AI image generation",
            "one-shot webpage processing",
        ],
    }
    if service is not None:
        status["imageApi"] = service.get_config_status().model_dump(by_alias=True)
    return status


def read(uri: str) -> list[ReadResourceContents]:
    """Read a resource by URI."""
    if uri == STATUS_URI:
        payload: dict[str, Any] = server_status()
    elif uri == SAMPLE_PROMPTS_URI:
        payload = {
            "description": "Example English prompts in the style AIPIC generates",
            "samples": sample_prompts(),
        }
    else:
        raise ToolError(f"Unknown resource: {uri}", {"uri": uri})

    return [
        ReadResourceContents(
            content=json.dumps(payload, indent=2, ensure_ascii=False),
            mime_type="application/json",
        )
    ]
