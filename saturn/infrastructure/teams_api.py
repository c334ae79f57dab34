"""HTTP client for the team processing service."""
from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlparse

import httpx
from pydantic import ValidationError

from saturn.core.schema import EnqueueTeamRequest, EnqueueTeamResponse, ProcessedDataPayload
from saturn.domain import TeamStat


class TeamsApiError(RuntimeError):
    """Base class for failures talking to the team processing service."""


class TeamsTransportError(TeamsApiError):
    """Raised on a non-success status or a network-level failure."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TeamsPayloadError(TeamsApiError):
    """Raised when a response body cannot be parsed."""


class TeamsApiClient:
    """Async client for the enqueue and processed-data endpoints.

    A single ``httpx.AsyncClient`` is reused for every call. Calls are made
    one at a time by the orchestrator, so no locking is needed.
    """

    ENQUEUE_PATH = "/Teams/EnqueueTeam"
    PROCESSED_DATA_PATH = "/Teams/GetProcessedData/{correlation_id}"

    def __init__(
        self,
        api_base: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        parsed = urlparse(api_base)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("api_base must include scheme and host")

        self._api_base = api_base.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _url(self, path: str) -> str:
        return f"{self._api_base}{path}"

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise TeamsTransportError(f"{method} {url} failed: {exc}") from exc
        if not response.is_success:
            raise TeamsTransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise TeamsPayloadError(f"response from {response.url} was not valid JSON") from exc

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    async def enqueue_team(self, team_number: int) -> str:
        """Queue processing for ``team_number`` and return its correlation id.

        An absent or empty ``correlationId`` comes back as ``""``.
        """

        request = EnqueueTeamRequest(team_number=team_number)
        response = await self._send(
            "POST",
            self._url(self.ENQUEUE_PATH),
            json=request.model_dump(by_alias=True),
        )
        body = self._json(response)
        if body is None:
            return ""
        try:
            payload = EnqueueTeamResponse.model_validate(body)
        except ValidationError as exc:
            raise TeamsPayloadError(f"unexpected enqueue response for team {team_number}") from exc
        return payload.correlation_id or ""

    async def get_processed_data(self, correlation_id: str) -> list[TeamStat]:
        """Fetch processed rows for a job; an empty list means not ready yet."""

        path = self.PROCESSED_DATA_PATH.format(correlation_id=quote(correlation_id, safe=""))
        response = await self._send("GET", self._url(path))
        body = self._json(response)
        try:
            rows = ProcessedDataPayload.validate_python(body)
        except ValidationError as exc:
            raise TeamsPayloadError(f"unexpected processed data for {correlation_id}") from exc
        return [row.to_domain() for row in rows or []]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["TeamsApiClient", "TeamsApiError", "TeamsPayloadError", "TeamsTransportError"]
