"""Table row tools: list, add, update."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from glide_mcp.gateway.protocol import RowUpdateParams, RowValuesParams, TableRowsParams
from glide_mcp.tools.base import RiskLevel
from glide_mcp.tools.builtins.glide_api import APP_ID_SCHEMA, TABLE_ID_SCHEMA, GlideApiTool

if TYPE_CHECKING:
    from glide_mcp.backend.client import HttpMethod


def _rows_path(app_id: str, table_id: str) -> str:
    return f"/apps/{app_id}/tables/{table_id}/rows"


class GetTableRowsTool(GlideApiTool):
    """GET /apps/{appId}/tables/{tableId}/rows with optional limit/offset.

    limit and offset are appended only when truthy, so offset=0 is dropped
    unless include_zero_offset is set (GLIDE_INCLUDE_ZERO_OFFSET).
    """

    params_model = TableRowsParams

    def __init__(self, *, include_zero_offset: bool = False) -> None:
        self._include_zero_offset = include_zero_offset

    @property
    def name(self) -> str:
        return "get_table_rows"

    @property
    def description(self) -> str:
        return "Get rows from a table in a Glide app"

    @property
    def risk_level(self) -> RiskLevel:
        return RiskLevel.low

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "appId": APP_ID_SCHEMA,
                "tableId": TABLE_ID_SCHEMA,
                "limit": {
                    "type": "number",
                    "description": "Maximum number of rows to return",
                    "minimum": 1,
                },
                "offset": {
                    "type": "number",
                    "description": "Number of rows to skip",
                    "minimum": 0,
                },
            },
            "required": ["appId", "tableId"],
        }

    def build_request(self, params: TableRowsParams) -> tuple[HttpMethod, str, Any]:
        query: list[tuple[str, int]] = []
        if params.limit:
            query.append(("limit", params.limit))
        if params.offset or (self._include_zero_offset and params.offset == 0):
            query.append(("offset", params.offset))

        path = _rows_path(params.appId, params.tableId)
        if query:
            path = f"{path}?{urlencode(query)}"
        return "GET", path, None


class AddTableRowTool(GlideApiTool):
    """POST /apps/{appId}/tables/{tableId}/rows"""

    params_model = RowValuesParams

    @property
    def name(self) -> str:
        return "add_table_row"

    @property
    def description(self) -> str:
        return "Add a new row to a table in a Glide app"

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "appId": APP_ID_SCHEMA,
                "tableId": TABLE_ID_SCHEMA,
                "values": {
                    "type": "object",
                    "description": "Column values for the new row",
                    "additionalProperties": True,
                },
            },
            "required": ["appId", "tableId", "values"],
        }

    def build_request(self, params: RowValuesParams) -> tuple[HttpMethod, str, Any]:
        return "POST", _rows_path(params.appId, params.tableId), params.values


class UpdateTableRowTool(GlideApiTool):
    """POST /apps/{appId}/tables/{tableId}/rows/{rowId}"""

    params_model = RowUpdateParams

    @property
    def name(self) -> str:
        return "update_table_row"

    @property
    def description(self) -> str:
        return "Update an existing row in a table"

    @property
    def parameters(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "appId": APP_ID_SCHEMA,
                "tableId": TABLE_ID_SCHEMA,
                "rowId": {
                    "type": "string",
                    "description": "ID of the row to update",
                },
                "values": {
                    "type": "object",
                    "description": "New column values for the row",
                    "additionalProperties": True,
                },
            },
            "required": ["appId", "tableId", "rowId", "values"],
        }

    def build_request(self, params: RowUpdateParams) -> tuple[HttpMethod, str, Any]:
        return (
            "POST",
            f"{_rows_path(params.appId, params.tableId)}/{params.rowId}",
            params.values,
        )
