"""MCP tool definitions for AIPIC."""

from . import analysis, images, prompts, webpage

__all__ = [
    "analysis",
    "images",
    "prompts",
    "webpage",
]
