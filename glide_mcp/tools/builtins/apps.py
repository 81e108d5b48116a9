from __future__ import annotations

from typing import TYPE_CHECKING, Any

from glide_mcp.gateway.protocol import AppParams
from glide_mcp.tools.base import RiskLevel
from glide_mcp.tools.builtins.glide_api import APP_ID_SCHEMA, GlideApiTool

if TYPE_CHECKING:
    from glide_mcp.backend.client import HttpMethod


class GetAppTool(GlideApiTool):
    """GET /apps/{appId}"""

    params_model = AppParams

    @property
    def name(self) -> str:
        return "get_app"

    @property
    def description(self) -> str:
        return "Get information about a Glide app"

    @property
    def risk_level(self) -> RiskLevel:
        return RiskLevel.low

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {"appId": APP_ID_SCHEMA},
            "required": ["appId"],
        }

    def build_request(self, params: AppParams) -> tuple[HttpMethod, str, Any]:
        return "GET", f"/apps/{params.appId}", None


class GetTablesTool(GlideApiTool):
    """GET /apps/{appId}/tables"""

    params_model = AppParams

    @property
    def name(self) -> str:
        return "get_tables"

    @property
    def description(self) -> str:
        return "Get tables for a Glide app"

    @property
    def risk_level(self) -> RiskLevel:
        return RiskLevel.low

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {"appId": APP_ID_SCHEMA},
            "required": ["appId"],
        }

    def build_request(self, params: AppParams) -> tuple[HttpMethod, str, Any]:
        return "GET", f"/apps/{params.appId}/tables", None
