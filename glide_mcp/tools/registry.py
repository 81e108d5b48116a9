from __future__ import annotations

import structlog
from mcp import types

from glide_mcp.tools.base import BaseTool, RiskLevel

logger = structlog.get_logger()


class ToolRegistry:
    """Registry for MCP tools. Provides lookup and schema listing."""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool. Raises ValueError if name already registered."""
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        logger.debug("tool_registered", tool_name=tool.name)

    def get(self, name: str) -> BaseTool | None:
        """Get a tool by name. Returns None if not found."""
        return self._tools.get(name)

    def list_tools(self) -> list[BaseTool]:
        """Return registered tools in registration order."""
        return list(self._tools.values())

    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def get_tools_schema(self) -> list[types.Tool]:
        """Return tools in MCP tools/list format."""
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.parameters,
                annotations=types.ToolAnnotations(
                    readOnlyHint=tool.risk_level == RiskLevel.low,
                ),
            )
            for tool in self.list_tools()
        ]
