"""Manifold REST API client - sends one outbound request per tool call."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from manifoldmcp.errors import MissingCredentialError, RemoteError
from manifoldmcp.models.envelope import OutboundRequest

if TYPE_CHECKING:
    from manifoldmcp.config.settings import Settings

log = structlog.get_logger(__name__)

MANIFOLD_API_BASE = "https://api.manifold.markets"
DEFAULT_API_KEY_ENV = "MANIFOLD_API_KEY"


class ManifoldClient:
    """Authenticated gateway to the Manifold API.

    Writes carry ``Authorization: Key <api_key>``; reads are anonymous. No retry and
    no timeout beyond ``timeout`` (httpx default when None). ``transport`` lets
    tests substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str = MANIFOLD_API_BASE,
        api_key: str | None = None,
        *,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_key_env = api_key_env
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> ManifoldClient:
        return cls(
            base_url=settings.api_base,
            api_key=settings.api_key,
            api_key_env=settings.api_key_env,
            timeout=settings.timeout_sec,
            transport=transport,
        )

    def _headers(self, request: OutboundRequest) -> dict[str, str]:
        if not request.authenticated:
            return {"Accept": "application/json"}
        if not self.api_key:
            raise MissingCredentialError(self.api_key_env)
        return {"Authorization": f"Key {self.api_key}"}

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"base_url": self.base_url}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def send(self, request: OutboundRequest) -> httpx.Response:
        """Perform the request. Raises MissingCredentialError before any I/O, RemoteError after."""
        headers = self._headers(request)
        log.debug("remote_request", method=request.method, path=request.path)
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.request(
                    request.method,
                    request.path,
                    params=request.params or None,
                    json=request.body,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            log.warning("remote_unreachable", path=request.path, error=str(e))
            raise RemoteError(f"Manifold API request failed: {e}") from e
        if not response.is_success:
            detail = response.text if request.error_from_body else response.reason_phrase
            log.warning("remote_error", path=request.path, status=response.status_code)
            raise RemoteError(f"Manifold API error: {detail}", status_code=response.status_code)
        return response
