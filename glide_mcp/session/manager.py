"""GlideSession: which Glide API client, if any, is active.

Two states: unconfigured (no client) and configured (one client bound to a
version and API key). set_version replaces the client wholesale; data tools
take a snapshot via require_client() before their first await, so a
concurrent switch never changes the client a call is already using.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from glide_mcp.backend.client import DEFAULT_TIMEOUT_S, GlideClient
from glide_mcp.backend.variants import available_versions, get_variant
from glide_mcp.infra.errors import InvalidParamsError, InvalidRequestError

if TYPE_CHECKING:
    from glide_mcp.config.settings import GlideSettings

logger = structlog.get_logger()


class GlideSession:
    """Holds at most one active GlideClient.

    Passed explicitly to tools through ToolContext; there is no module-level
    session, so tests and multiple servers stay isolated.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._active: GlideClient | None = None
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: GlideSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GlideSession:
        """Build a session, pre-configured when GLIDE_API_KEY and GLIDE_API_VERSION are set.

        An unknown version leaves the session unconfigured (logged, not raised).
        """
        session = cls(timeout=settings.http_timeout_s, transport=transport)

        if not (settings.api_key and settings.api_version):
            logger.info(
                "glide_session_unconfigured",
                msg="API version and key must be set using set_api_version.",
            )
            return session

        try:
            variant = get_variant(settings.api_version)
        except KeyError:
            logger.warning(
                "glide_session_unconfigured",
                version=settings.api_version,
                available=available_versions(),
                msg="GLIDE_API_VERSION is not a known version; ignoring environment.",
            )
            return session

        session._active = session._make_client(variant.version.value, settings.api_key)
        logger.info("glide_session_configured_from_env", version=variant.version.value)
        return session

    @property
    def active(self) -> GlideClient | None:
        return self._active

    @property
    def is_configured(self) -> bool:
        return self._active is not None

    def _make_client(self, version: str, api_key: str) -> GlideClient:
        return GlideClient(
            get_variant(version),
            api_key,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def set_version(self, version: str, api_key: str) -> GlideClient:
        """Activate a fresh client for version + api_key.

        Raises InvalidParamsError for an empty/whitespace key or an unknown
        version; the current client is left untouched in both cases.
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise InvalidParamsError("API key cannot be empty")
        try:
            get_variant(version)
        except KeyError:
            raise InvalidParamsError(f"Invalid API version: {version}") from None

        previous = self._active
        self._active = self._make_client(version, api_key)
        logger.info(
            "glide_api_version_set",
            version=version,
            replaced=previous.version if previous else None,
        )
        if previous is not None:
            await previous.retire()
        return self._active

    def require_client(self) -> GlideClient:
        """Return the active client. Raises InvalidRequestError if unconfigured."""
        client = self._active
        if client is None:
            raise InvalidRequestError(
                "API version not set. Call set_api_version first."
            )
        return client

    async def aclose(self) -> None:
        """Retire the active client at shutdown."""
        client, self._active = self._active, None
        if client is not None:
            await client.retire()
