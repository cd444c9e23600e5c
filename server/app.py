"""MCP server factory for the technical search tool."""

from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from config.config import Config
from orchestrator.search_orchestrator import SearchOrchestrator
from search.base_provider import BaseSearchProvider
from server.schemas import EXAMPLE_RESOURCE, SEARCH_TOOL, SEARCH_TOOL_NAME, text_content
from utils.logger import get_logger

logger = get_logger(__name__)


class SearchToolServer:
    """
    Protocol boundary: advertises the ``search`` tool and one example resource,
    and dispatches tool calls to the SearchOrchestrator.
    """

    def __init__(self, orchestrator: SearchOrchestrator, name: str, version: str):
        self.orchestrator = orchestrator
        self.name = name
        self.version = version

    def list_tools(self) -> list[types.Tool]:
        return [SEARCH_TOOL]

    def list_resources(self) -> list[types.Resource]:
        return [EXAMPLE_RESOURCE]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        if name != SEARCH_TOOL_NAME:
            logger.warning(f"Unknown tool requested: {name}")
            return text_content(f"Error: Unknown tool '{name}'. Only 'search' is supported.")

        report = await self.orchestrator.handle_search(arguments)
        return text_content(report)

    def build_server(self) -> Server:
        """Register the handlers on an MCP low-level server."""
        server = Server(self.name, version=self.version)

        @server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.list_tools()

        @server.list_resources()
        async def handle_list_resources() -> list[types.Resource]:
            return self.list_resources()

        # Argument errors are reported as text by the orchestrator, not by schema validation
        @server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

        return server

    async def run_stdio(self) -> None:
        """Serve one MCP session over stdin/stdout until the client disconnects."""
        server = self.build_server()
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Server initialized and running")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def create_server(provider: BaseSearchProvider, config: Config | None = None) -> SearchToolServer:
    """Factory function to create the search tool server."""
    config = config or Config()
    return SearchToolServer(
        orchestrator=SearchOrchestrator(provider),
        name=config.SERVER_NAME,
        version=config.SERVER_VERSION,
    )
