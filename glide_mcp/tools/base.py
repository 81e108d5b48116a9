from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from glide_mcp.tools.context import ToolContext


class RiskLevel(StrEnum):
    """Tool-level risk classification.

    low: read-only against the Glide API (advertised as readOnlyHint).
    high: changes session state or writes rows.
    Undeclared tools default to 'high' (fail-closed).
    """

    low = "low"
    high = "high"


class BaseTool(ABC):
    """Abstract base class for MCP tools."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name used in tool calls."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        ...

    @property
    @abstractmethod
    def parameters(self) -> dict:
        """JSON Schema describing the tool's input parameters."""
        ...

    @property
    def risk_level(self) -> RiskLevel:
        """Fail-closed default: high. Read-only tools should explicitly declare low."""
        return RiskLevel.high

    @abstractmethod
    async def execute(self, arguments: dict, context: ToolContext) -> Any:
        """Execute the tool with given arguments and the runtime context.

        Returns a str (sent as-is) or any JSON-compatible value (pretty-printed).
        """
        ...
