"""MCP server over stdio - exposes the dispatcher's tools to MCP clients."""

from __future__ import annotations

import mcp.types as types
import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from manifoldmcp.config.settings import Settings
from manifoldmcp.models.envelope import ToolFailure
from manifoldmcp.remote.client import ManifoldClient
from manifoldmcp.tools.dispatcher import Dispatcher

log = structlog.get_logger(__name__)


def to_mcp_error(failure: ToolFailure) -> McpError:
    """JSON-RPC error for a failed call; ``data.kind`` carries the error kind name."""
    return McpError(
        types.ErrorData(
            code=failure.kind.jsonrpc_code,
            message=failure.message,
            data={"kind": failure.kind.value},
        )
    )


def create_server(settings: Settings, dispatcher: Dispatcher | None = None) -> Server:
    """Build the MCP server. Argument validation is left to the dispatcher.

    ``tools/call`` is registered as a raw request handler: the SDK's
    ``call_tool`` decorator folds every exception into an ``isError`` result,
    which would drop the error code. Raising ``McpError`` from a raw handler
    makes the session answer with a JSON-RPC error instead.
    """
    dispatcher = dispatcher or Dispatcher(ManifoldClient.from_settings(settings))
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
            for d in dispatcher.list_tools()
        ]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call(req.params.name, req.params.arguments)
        if result.error is not None:
            raise to_mcp_error(result.error)
        content = [types.TextContent(type="text", text=block.text) for block in result.content]
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(settings: Settings) -> None:
    """Serve on stdin/stdout until the transport closes."""
    server = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        log.info("server_started", name=settings.server_name, api_base=settings.api_base)
        await server.run(read_stream, write_stream, server.create_initialization_options())
    log.info("server_stopped")
