"""Response formatting utilities for MCP tools."""

from workflows.content_analysis.types import AnalysisResult
from workflows.shared.text_utils import truncate_text


def preview(text: str, limit: int) -> str:
    """Shortened text for tool summaries."""
    return truncate_text(text, limit)


def format_analysis(analysis: AnalysisResult, summary: str) -> dict:
    """Analysis result as a JSON dict with camelCase placeholders."""
    return {
        "summary": summary,
        "kind": analysis.kind,
        "placeholders": [p.to_wire() for p in analysis.placeholders],
        "suggestions": list(analysis.suggestions),
    }
