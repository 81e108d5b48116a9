"""Tool argument models.

Field names follow the tool input schemas (camelCase) so arguments validate
as delivered by the MCP client.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from glide_mcp.infra.errors import InvalidParamsError

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class SetApiVersionParams(BaseModel):
    version: str
    apiKey: str


class AppParams(BaseModel):
    appId: str


class TableParams(AppParams):
    tableId: str


class TableRowsParams(TableParams):
    limit: int | None = Field(None, ge=1)
    offset: int | None = Field(None, ge=0)


class RowValuesParams(TableParams):
    values: dict[str, Any]


class RowUpdateParams(RowValuesParams):
    rowId: str


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "arguments"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_arguments(model: type[ParamsT], arguments: dict[str, Any] | None) -> ParamsT:
    """Validate raw tool arguments against model.

    Raises InvalidParamsError listing every failing field.
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        raise InvalidParamsError(f"Invalid arguments: {_describe(e)}") from e
