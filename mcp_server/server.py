"""
MCP server for AIPIC image placeholder generation.

Entry point for the MCP server using STDIO transport.
Run with: python -m mcp_server.server  (or the ``aipic-mcp`` script)
"""

import asyncio
import json
import logging
import os
from collections.abc import Iterable
from typing import Any

from dotenv import load_dotenv

load_dotenv()

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool
from pydantic import AnyUrl

from core.config import configure_logging
from core.images import ImageGenConfig, ImageGenerationService, set_image_service
from core.logging import end_run, start_run
from core.utils.async_http_client import cleanup_all_clients

from . import resources
from .errors import ToolError

logger = logging.getLogger(__name__)

# Create MCP server
server = Server(resources.SERVER_NAME, version=resources.SERVER_VERSION)

# Import tool handlers after server is created
from .tools import analysis, images, prompts, webpage

TOOL_MODULES = (analysis, prompts, images, webpage)

# Tool name -> handling module
_ROUTES = {tool.name: module for module in TOOL_MODULES for tool in module.get_tools()}


async def init_services() -> None:
    """Configure the image client from the environment, when a key is present."""
    config = ImageGenConfig()
    if config.has_api_key:
        set_image_service(ImageGenerationService(config))
        logger.info(f"Image generation configured from environment (model {config.model_id})")
    else:
        logger.info("No image API key in environment; waiting for configure-api")


async def cleanup_services() -> None:
    """Close all HTTP clients."""
    await cleanup_all_clients()


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    tools = []
    for module in TOOL_MODULES:
        tools.extend(module.get_tools())
    return tools


async def dispatch(name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Route a tool call, converting failures into an error payload."""
    try:
        module = _ROUTES.get(name)
        if module is None:
            raise ToolError(
                f"Unknown tool: {name}. Available tools: {', '.join(sorted(_ROUTES))}."
            )
        return await module.handle(name, arguments or {})

    except ToolError as e:
        # Return execution error with actionable message
        return {"error": e.message, "details": e.details}
    except Exception as e:
        logger.exception(f"Unexpected error in tool {name}")
        return {"error": f"Internal error: {str(e)}"}


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    result = await dispatch(name, arguments)
    return [TextContent(type="text", text=json.dumps(result, ensure_ascii=False, default=str))]


@server.list_resources()
async def list_resources() -> list[Resource]:
    """List status and sample-prompt resources."""
    return resources.get_resources()


@server.read_resource()
async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
    """Read a resource by URI."""
    return resources.read(str(uri))


async def main():
    """Run the MCP server."""
    configure_logging("mcp_server")
    start_run(f"server-{os.getpid()}")
    await init_services()

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("AIPIC MCP server started")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await cleanup_services()
        end_run()


if __name__ == "__main__":
    asyncio.run(main())
