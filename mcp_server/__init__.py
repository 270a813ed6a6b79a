"""MCP server for AIPIC image placeholder generation."""

__all__ = ["main"]


def main():
    """Entry point for the MCP server."""
    import asyncio
    from .server import main as _main

    asyncio.run(_main())
