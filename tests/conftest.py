"""Shared pytest fixtures for Glide MCP tests.

The Glide API is replaced by an httpx.MockTransport that records every
request, so no test touches the network.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from glide_mcp.session.manager import GlideSession
from glide_mcp.tools.builtins import register_builtins
from glide_mcp.tools.registry import ToolRegistry

Responder = Callable[[httpx.Request], httpx.Response]


class FakeGlideBackend:
    """Records requests and answers them with a configurable responder.

    Default answer: 200 {"ok": true}.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responder: Responder = lambda _request: httpx.Response(200, json={"ok": True})

    def respond_with(self, responder: Responder) -> None:
        self._responder = responder

    def respond_json(self, status_code: int, payload: Any) -> None:
        self._responder = lambda _request: httpx.Response(status_code, json=payload)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def backend() -> FakeGlideBackend:
    return FakeGlideBackend()


@pytest_asyncio.fixture
async def session(backend: FakeGlideBackend) -> AsyncGenerator[GlideSession, None]:
    """Unconfigured session wired to the fake backend."""
    glide_session = GlideSession(transport=backend.transport)
    yield glide_session
    await glide_session.aclose()


@pytest.fixture
def registry() -> ToolRegistry:
    tool_registry = ToolRegistry()
    register_builtins(tool_registry)
    return tool_registry
