"""MCP stdio server exposing the Glide API tools."""

from __future__ import annotations

import asyncio
from typing import Any

import structlog
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from glide_mcp import __version__
from glide_mcp.config.settings import Settings, get_settings
from glide_mcp.gateway.dispatch import dispatch_tool_call
from glide_mcp.infra.errors import GlideMCPError
from glide_mcp.infra.logging import setup_logging
from glide_mcp.session.manager import GlideSession
from glide_mcp.tools.builtins import register_builtins
from glide_mcp.tools.registry import ToolRegistry

logger = structlog.get_logger()

SERVER_NAME = "glide-api-server"

_MCP_ERROR_CODES: dict[str, int] = {
    "INVALID_PARAMS": types.INVALID_PARAMS,
    "INVALID_REQUEST": types.INVALID_REQUEST,
    "METHOD_NOT_FOUND": types.METHOD_NOT_FOUND,
    "INTERNAL_ERROR": types.INTERNAL_ERROR,
}


def to_mcp_error(exc: GlideMCPError) -> McpError:
    """Translate an application error into an MCP JSON-RPC error."""
    code = _MCP_ERROR_CODES.get(exc.code, types.INTERNAL_ERROR)
    return McpError(types.ErrorData(code=code, message=str(exc)))


async def handle_call_tool(
    *,
    registry: ToolRegistry,
    session: GlideSession,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """call_tool handler body: dispatch, mapping known errors to McpError.

    Unexpected exceptions are logged and re-raised unchanged.
    """
    try:
        return await dispatch_tool_call(
            registry=registry, session=session, name=name, arguments=arguments,
        )
    except GlideMCPError as e:
        logger.warning("tool_call_failed", tool_name=name, code=e.code, error=str(e))
        raise to_mcp_error(e) from e
    except Exception:
        logger.exception("tool_call_unexpected_error", tool_name=name)
        raise


def build_registry(settings: Settings) -> ToolRegistry:
    registry = ToolRegistry()
    register_builtins(registry, include_zero_offset=settings.glide.include_zero_offset)
    return registry


def build_server(registry: ToolRegistry, session: GlideSession) -> Server:
    """Create the low-level MCP server with tools/list and tools/call wired up."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def _handle_list_tools() -> list[types.Tool]:
        return registry.get_tools_schema()

    @server.call_tool()
    async def _handle_call_tool(
        name: str, arguments: dict[str, Any]
    ) -> list[types.TextContent]:
        return await handle_call_tool(
            registry=registry, session=session, name=name, arguments=arguments,
        )

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client disconnects."""
    session = GlideSession.from_settings(settings.glide)
    registry = build_registry(settings)
    server = build_server(registry, session)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("glide_mcp_running", transport="stdio", tools=registry.tool_names())
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await session.aclose()


def main() -> None:
    settings = get_settings()
    setup_logging(
        json_output=settings.logging.json_output,
        log_level=settings.logging.level,
    )

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("glide_mcp_stopped", reason="interrupt")
