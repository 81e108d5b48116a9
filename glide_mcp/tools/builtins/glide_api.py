"""Shared base for tools that call the Glide API."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from glide_mcp.gateway.protocol import parse_arguments
from glide_mcp.tools.base import BaseTool

if TYPE_CHECKING:
    from glide_mcp.backend.client import HttpMethod
    from glide_mcp.tools.context import ToolContext

APP_ID_SCHEMA = {"type": "string", "description": "ID of the Glide app"}
TABLE_ID_SCHEMA = {"type": "string", "description": "ID of the table"}


class GlideApiTool(BaseTool):
    """A tool that maps its arguments onto exactly one Glide API request.

    The active client is read once, before argument validation, so an
    unconfigured session fails with InvalidRequestError regardless of the
    arguments and a concurrent set_api_version cannot swap the client
    mid-call.
    """

    params_model: type[BaseModel]

    @abstractmethod
    def build_request(self, params: Any) -> tuple[HttpMethod, str, Any]:
        """Return (method, path, body) for validated params."""
        ...

    async def execute(self, arguments: dict, context: ToolContext) -> Any:
        client = context.session.require_client()
        params = parse_arguments(self.params_model, arguments)
        method, path, body = self.build_request(params)
        return await client.request(method, path, body)
