"""
MCP Server implementation for admin-forms.

Provides both stdio and SSE transport support for the Model Context Protocol.
"""

import json
import logging
from typing import Any, Callable, Literal

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from admin_forms.config import get_config
from admin_forms.errors import ReadOnlyFieldError, UnknownFieldError, UnknownSchemaError
from admin_forms.mcp_server.tools import (
    get_mcp_tools,
    mcp_describe_schema,
    mcp_list_schemas,
    mcp_validate_form,
)
from admin_forms.schemas import get_schemas

logger = logging.getLogger("admin-forms-mcp")

TOOL_HANDLERS: dict[str, Callable[..., dict[str, Any]]] = {
    "list_schemas": lambda arguments: mcp_list_schemas(),
    "describe_schema": lambda arguments: mcp_describe_schema(arguments["name"]),
    "validate_form": lambda arguments: mcp_validate_form(
        arguments["name"],
        arguments.get("values", {}),
        edit=arguments.get("edit", False),
    ),
}


def call_tool_json(name: str, arguments: dict[str, Any]) -> str:
    """Run a tool and serialise its outcome, reporting bad requests as JSON errors."""
    indent = get_config().indent_json_output
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return json.dumps({"error": f"Unknown tool: {name}"})
    try:
        result = handler(arguments)
    except (UnknownSchemaError, UnknownFieldError, ReadOnlyFieldError, ValueError) as e:
        logger.error(f"Error in {name}: {e}")
        return json.dumps({"error": str(e)})
    except KeyError as e:
        logger.error(f"Missing argument for {name}: {e}")
        return json.dumps({"error": f"Missing argument: {e}"})
    return json.dumps(result, indent=indent)


def create_mcp_server() -> Server:
    """
    Create and configure the MCP server instance.

    Returns:
        Configured MCP Server with admin-forms tools registered.
    """
    server = Server("admin-forms-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        tools_def = get_mcp_tools()
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in tools_def
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Tool call: {name}")
        return [TextContent(type="text", text=call_tool_json(name, arguments or {}))]

    return server


async def run_stdio_server(server: Server) -> None:
    """
    Run MCP server with stdio transport.

    Used for desktop clients and local subprocess communication.
    """
    logger.info("Starting MCP server with stdio transport...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_sse_app(server: Server) -> Starlette:
    """
    Create Starlette app for SSE transport.

    Used for remote/Docker deployment.
    """
    # SSE transport - messages endpoint is relative to SSE mount point
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(scope, receive, send):
        """Handle SSE connections - raw ASGI handler."""
        async with sse_transport.connect_sse(scope, receive, send) as streams:
            await server.run(
                streams[0],
                streams[1],
                server.create_initialization_options(),
            )

    async def handle_messages(scope, receive, send):
        """Handle message POST requests - raw ASGI handler."""
        await sse_transport.handle_post_message(scope, receive, send)

    async def health_check(request):
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": "admin-forms-mcp",
            "transport": "sse",
            "schemas": get_schemas().names(),
        })

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Mount("/sse/messages", app=handle_messages),
            Mount("/sse", app=handle_sse),
        ],
    )


async def run_sse_server(server: Server, host: str = "0.0.0.0", port: int = 8080) -> None:
    """
    Run MCP server with SSE transport.

    Args:
        server: MCP Server instance
        host: Host to bind to
        port: Port to listen on
    """
    import uvicorn

    logger.info(f"Starting MCP server with SSE transport on {host}:{port}...")

    app = create_sse_app(server)
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    server_instance = uvicorn.Server(config)
    await server_instance.serve()


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Run MCP server with specified transport.

    Args:
        transport: Transport type - "stdio" or "sse"
        host: Host for SSE transport (default: 0.0.0.0)
        port: Port for SSE transport (default: 8080)
    """
    # Build the registry up front so schema definition errors abort start-up
    get_schemas()
    server = create_mcp_server()

    if transport == "stdio":
        await run_stdio_server(server)
    elif transport == "sse":
        await run_sse_server(server, host, port)
    else:
        raise ValueError(f"Unknown transport: {transport}. Use 'stdio' or 'sse'.")
