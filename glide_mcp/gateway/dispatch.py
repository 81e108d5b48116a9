"""Core dispatch: tool lookup → execute with session context → normalized text result.

Kept free of MCP server wiring so it can be exercised directly in tests.
GlideMCPError subclasses propagate to the caller; app.py maps them to MCP codes.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from mcp import types

from glide_mcp.infra.errors import MethodNotFoundError
from glide_mcp.session.manager import GlideSession
from glide_mcp.tools.context import ToolContext
from glide_mcp.tools.registry import ToolRegistry

logger = structlog.get_logger()


def render_result(result: Any) -> str:
    """Pretty-print a backend payload as JSON, string payloads included."""
    return json.dumps(result, indent=2, ensure_ascii=False)


def normalize_result(result: Any) -> list[types.TextContent]:
    """Wrap a tool result in the single-text-block envelope.

    A TextContent returned by the tool is sent as-is.
    """
    if isinstance(result, types.TextContent):
        return [result]
    return [types.TextContent(type="text", text=render_result(result))]


async def dispatch_tool_call(
    *,
    registry: ToolRegistry,
    session: GlideSession,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Run one tool call and return its normalized content.

    Raises MethodNotFoundError for unknown tools. Errors raised by the tool
    propagate unchanged.
    """
    tool = registry.get(name)
    if tool is None:
        raise MethodNotFoundError(f"Unknown tool: {name}")

    logger.info("tool_call", tool_name=name)
    result = await tool.execute(arguments or {}, ToolContext(session=session))
    logger.info("tool_call_done", tool_name=name)
    return normalize_result(result)
