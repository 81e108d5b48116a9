"""Custom exception hierarchy for the Glide MCP server.

All application-specific exceptions inherit from GlideMCPError,
which carries an error code for MCP error mapping.
"""

from __future__ import annotations


class GlideMCPError(Exception):
    """Base exception for all Glide MCP errors."""

    def __init__(self, message: str, *, code: str = "INTERNAL_ERROR") -> None:
        super().__init__(message)
        self.code = code


class InvalidParamsError(GlideMCPError):
    """Caller-supplied tool arguments failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_PARAMS")


class InvalidRequestError(GlideMCPError):
    """Operation is not valid in the current session state."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_REQUEST")


class MethodNotFoundError(GlideMCPError):
    """Tool name is not registered."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="METHOD_NOT_FOUND")


class BackendError(GlideMCPError):
    """Glide API or transport failure during a network call.

    status_code is None when no HTTP response was received
    (connection failure, timeout).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message, code="INTERNAL_ERROR")
        self.status_code = status_code
