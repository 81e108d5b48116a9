from __future__ import annotations

from glide_mcp.tools.builtins.api_version import SetApiVersionTool
from glide_mcp.tools.builtins.apps import GetAppTool, GetTablesTool
from glide_mcp.tools.builtins.rows import AddTableRowTool, GetTableRowsTool, UpdateTableRowTool
from glide_mcp.tools.registry import ToolRegistry


def register_builtins(
    registry: ToolRegistry,
    *,
    include_zero_offset: bool = False,
) -> None:
    """Register all Glide tools with the registry, in tools/list order."""
    registry.register(SetApiVersionTool())
    registry.register(GetAppTool())
    registry.register(GetTablesTool())
    registry.register(GetTableRowsTool(include_zero_offset=include_zero_offset))
    registry.register(AddTableRowTool())
    registry.register(UpdateTableRowTool())
