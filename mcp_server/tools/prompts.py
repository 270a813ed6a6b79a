"""Prompt synthesis tool: placeholders to English image prompts."""

from typing import Any

from mcp.types import Tool

from workflows.content_analysis.types import ImagePlaceholder
from workflows.prompt_synthesis import PromptConfig, generate_prompts
from workflows.prompt_synthesis.config import LANGUAGES, QUALITIES, STYLES

from ..errors import ToolError
from ..response_utils import preview
from ..validation_utils import parse_model, parse_model_list

PLACEHOLDER_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "context": {"type": "string"},
        "suggestedPrompt": {"type": "string"},
        "position": {
            "type": "object",
            "properties": {
                "selector": {"type": "string"},
                "line": {"type": "integer"},
                "section": {"type": "string"},
            },
        },
        "size": {
            "type": "object",
            "properties": {
                "width": {"type": "integer"},
                "height": {"type": "integer"},
                "aspectRatio": {"type": "string"},
            },
        },
        "alt": {"type": "string"},
    },
    "required": ["id", "context", "suggestedPrompt", "position"],
}

PROMPT_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "style": {"type": "string", "enum": list(STYLES), "default": "illustration"},
        "quality": {"type": "string", "enum": list(QUALITIES), "default": "high"},
        "includeStyle": {"type": "boolean", "default": True},
        "language": {"type": "string", "enum": list(LANGUAGES), "default": "auto"},
    },
    "description": "Prompt generation options",
}


def get_tools() -> list[Tool]:
    """Get prompt synthesis tools."""
    return [
        Tool(
            name="generate-prompts",
            description=(
                "Generate an English AI image prompt for each placeholder returned by "
                "analyze-webpage or analyze-article. Output order matches input order."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "placeholders": {
                        "type": "array",
                        "items": PLACEHOLDER_SCHEMA,
                        "description": "Image placeholders",
                    },
                    "config": PROMPT_CONFIG_SCHEMA,
                },
                "required": ["placeholders"],
                "additionalProperties": False,
            },
        ),
    ]


async def handle(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle prompt synthesis tool calls."""
    if name != "generate-prompts":
        raise ToolError(f"Unknown prompt tool: {name}")

    placeholders = parse_model_list(ImagePlaceholder, arguments.get("placeholders"), "placeholders")
    config = parse_model(PromptConfig, arguments.get("config") or {}, "config")

    results = generate_prompts(placeholders, config)
    return {
        "count": len(results),
        "prompts": [
            {
                "placeholderId": placeholder.id,
                "context": preview(placeholder.context, 100),
                "prompt": prompt,
            }
            for placeholder, prompt in results
        ],
    }
