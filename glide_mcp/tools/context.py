from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glide_mcp.session.manager import GlideSession


@dataclass(frozen=True)
class ToolContext:
    """Runtime context injected into tool execution by the dispatcher.

    session: the server's GlideSession. Data tools MUST read the active
    client once via session.require_client() and use that snapshot for the
    whole call.
    """

    session: GlideSession
