from __future__ import annotations

from typing import TYPE_CHECKING

from mcp import types

from glide_mcp.backend.variants import available_versions
from glide_mcp.gateway.protocol import SetApiVersionParams, parse_arguments
from glide_mcp.tools.base import BaseTool

if TYPE_CHECKING:
    from glide_mcp.tools.context import ToolContext


class SetApiVersionTool(BaseTool):
    """Switches the session to a Glide API version and key.

    Always permitted, whether or not a client is already active.
    """

    @property
    def name(self) -> str:
        return "set_api_version"

    @property
    def description(self) -> str:
        return "Set the Glide API version and authentication to use"

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "version": {
                    "type": "string",
                    "enum": available_versions(),
                    "description": "API version to use",
                },
                "apiKey": {
                    "type": "string",
                    "description": "API key for authentication",
                },
            },
            "required": ["version", "apiKey"],
        }

    async def execute(self, arguments: dict, context: ToolContext) -> types.TextContent:
        params = parse_arguments(SetApiVersionParams, arguments)
        await context.session.set_version(params.version, params.apiKey)
        # Plain confirmation text, not JSON-encoded like backend payloads
        return types.TextContent(
            type="text", text=f"Glide API version set to {params.version}",
        )
