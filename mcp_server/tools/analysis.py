"""Content analysis tools: find where HTML or text needs images."""

from typing import Any

from mcp.types import Tool

from workflows.content_analysis import analyze_article, analyze_webpage

from ..errors import ToolError
from ..response_utils import format_analysis
from ..validation_utils import require_str


def get_tools() -> list[Tool]:
    """Get content analysis tools."""
    return [
        Tool(
            name="analyze-webpage",
            description=(
                "Analyze HTML and list the locations that need images: <img> tags with "
                "missing or placeholder sources, and content blocks that would benefit "
                "from an illustration."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "htmlContent": {
                        "type": "string",
                        "description": "HTML content of the webpage",
                    },
                },
                "required": ["htmlContent"],
                "additionalProperties": False,
            },
        ),
        Tool(
            name="analyze-article",
            description=(
                "Analyze an article or plain-text/markdown document line by line and "
                "list the lines where an image would help, with their section."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "textContent": {
                        "type": "string",
                        "description": "Text content of the article or document",
                    },
                },
                "required": ["textContent"],
                "additionalProperties": False,
            },
        ),
    ]


async def handle(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle content analysis tool calls."""
    if name == "analyze-webpage":
        analysis = analyze_webpage(require_str(arguments, "htmlContent"))
        return format_analysis(
            analysis,
            f"Found {len(analysis.placeholders)} locations that need images",
        )

    elif name == "analyze-article":
        analysis = analyze_article(require_str(arguments, "textContent"))
        return format_analysis(
            analysis,
            f"Found {len(analysis.placeholders)} locations in the article suited to images",
        )

    else:
        raise ToolError(f"Unknown analysis tool: {name}")
