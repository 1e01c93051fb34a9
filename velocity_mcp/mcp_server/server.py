"""MCP server setup.

Exposes every registered tool over stdio. Each call answers with a single
text block; failures are text too, never protocol errors.
"""

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from velocity_mcp.config.settings import Settings
from velocity_mcp.services.graphql_client import GraphQLExecutor
from velocity_mcp.tools.catalog import build_tools
from velocity_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "MCP Velocity GraphQL"


def build_registry(executor: GraphQLExecutor, settings: Settings) -> ToolRegistry:
    registry = ToolRegistry()
    for tool in build_tools(executor, settings):
        registry.register(tool)
    return registry


def create_mcp_server(registry: ToolRegistry) -> Server:
    """
    Create MCP server exposing all registered tools.

    Args:
        registry: Tool registry with tools to expose

    Returns:
        MCP server instance
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=definition["name"],
                description=definition["description"],
                inputSchema=definition["inputSchema"],
            )
            for definition in registry.get_mcp_definitions()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        result = await registry.execute(name, **(arguments or {}))
        if not result.success:
            logger.info("Tool %s returned an error: %s", name, result.error)
        return [TextContent(type="text", text=result.text)]

    return server


async def serve(settings: Settings) -> None:
    """Run the MCP server on stdio until the host closes the stream."""
    async with GraphQLExecutor(settings) as executor:
        registry = build_registry(executor, settings)
        server = create_mcp_server(registry)
        logger.info("%s serving %d tools", SERVER_NAME, len(registry.list_tools()))

        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
