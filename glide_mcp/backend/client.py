from __future__ import annotations

import json
from typing import Any, Literal

import httpx
import structlog

from glide_mcp.backend.variants import BackendVariant
from glide_mcp.infra.errors import BackendError

logger = structlog.get_logger()

HttpMethod = Literal["GET", "POST"]

# httpx's own default; applied when no timeout is configured.
DEFAULT_TIMEOUT_S = 5.0


def _backend_message(response: httpx.Response) -> str | None:
    """Extract the Glide-provided `message` field from an error body, if any."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if not message:
        return None
    return message if isinstance(message, str) else str(message)


def _parse_body(response: httpx.Response) -> Any:
    """Return the response body verbatim: JSON when parseable, else raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class GlideClient:
    """A Glide API variant bound to one API key.

    Immutable once created: base URL and headers are fixed on the underlying
    httpx.AsyncClient at construction. Replaced clients are retired rather
    than closed, so requests already in flight complete on the connection
    pool they started on.
    """

    def __init__(
        self,
        variant: BackendVariant,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._variant = variant
        self._http = httpx.AsyncClient(
            base_url=variant.base_url,
            headers=variant.build_headers(api_key),
            timeout=timeout,
            transport=transport,
        )
        self._inflight = 0
        self._retired = False

    @property
    def version(self) -> str:
        return self._variant.version.value

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def request(
        self, method: HttpMethod, path: str, body: Any = None
    ) -> Any:
        """Send one request to the Glide API and return the parsed body.

        path is appended to the base URL as-is; query strings must already
        be encoded. Raises BackendError on non-2xx responses and transport
        failures. No retries.
        """
        self._inflight += 1
        try:
            logger.debug(
                "glide_request", method=method, path=path, version=self.version,
            )
            try:
                response = await self._http.request(
                    method,
                    path,
                    json=body,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                message = _backend_message(exc.response) or str(exc)
                logger.warning(
                    "glide_request_failed",
                    method=method,
                    path=path,
                    version=self.version,
                    status=status,
                    error=message,
                )
                raise BackendError(message, status_code=status) from exc
            except httpx.HTTPError as exc:
                message = str(exc) or type(exc).__name__
                logger.warning(
                    "glide_request_failed",
                    method=method,
                    path=path,
                    version=self.version,
                    status=None,
                    error=message,
                )
                raise BackendError(message) from exc
            return _parse_body(response)
        finally:
            self._inflight -= 1
            if self._retired and self._inflight == 0:
                await self._http.aclose()

    async def retire(self) -> None:
        """Mark the client as replaced; close once in-flight requests drain."""
        self._retired = True
        if self._inflight == 0:
            await self._http.aclose()
