"""Async client for the Slite public API."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Literal

import httpx
from loguru import logger

from .errors import (
    AskIndexError,
    AskInfoError,
    AutomationAssistantError,
    NoteCreateError,
    NoteFetchError,
    NoteSearchError,
    NoteUpdateError,
)
from .models import Note, NoteUpdate, SearchResult
from .settings import Settings

NoteFormat = Literal["md", "html"]

# Everything a single request can fail with: transport and status errors from
# httpx, ids that cannot form a valid URL, undecodable JSON and payloads that
# fail model validation.
_FAILURES = (httpx.HTTPError, httpx.InvalidURL, ValueError)


def _cause(exc: Exception) -> tuple[str, int | None]:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        text = (exc.response.text or "").strip() or exc.response.reason_phrase
        return f"HTTP {status}: {text}", status
    return str(exc) or type(exc).__name__, None


class SliteClient:
    """Thin wrapper around Slite's REST API.

    Every public method performs exactly one request and raises the matching
    :class:`~slite_mcp.errors.SliteApiError` subclass on any failure.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"x-slite-api-key": api_key, "Accept": "application/json"},
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> SliteClient:
        return cls(
            base_url=str(settings.slite_base_url),
            api_key=settings.slite_api_key,
            timeout_seconds=settings.http_timeout_seconds,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> SliteClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        resp = await self._client.request(method, path, params=params, json=json_body)
        resp.raise_for_status()
        return resp.json()

    async def get_note(self, note_id: str, fmt: NoteFormat = "md") -> Note:
        """Fetch a single note with its body as markdown or html."""
        try:
            raw = await self._request_json("GET", f"/notes/{note_id}", params={"format": fmt})
            return Note.model_validate(raw)
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error fetching note {}: {}", note_id, cause)
            raise NoteFetchError(note_id, cause, status) from exc

    async def create_note(
        self,
        title: str,
        markdown: str,
        *,
        parent_note_id: str | None = None,
        template_id: str | None = None,
        attributes: list[str] | None = None,
    ) -> Note:
        """Create a note. Optional fields are only sent when they carry a value."""
        payload: dict[str, Any] = {"title": title, "markdown": markdown}
        if parent_note_id:
            payload["parentNoteId"] = parent_note_id
        if template_id:
            payload["templateId"] = template_id
        if attributes:
            payload["attributes"] = attributes
        try:
            raw = await self._request_json("POST", "/notes", json_body=payload)
            return Note.model_validate(raw)
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error creating note: {}", cause)
            raise NoteCreateError(cause, status) from exc

    async def update_note(self, note_id: str, updates: NoteUpdate) -> Note:
        try:
            raw = await self._request_json(
                "PUT", f"/notes/{note_id}", json_body=updates.payload()
            )
            return Note.model_validate(raw)
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error updating note {}: {}", note_id, cause)
            raise NoteUpdateError(note_id, cause, status) from exc

    async def search_notes(self, query: str, limit: int = 10) -> list[SearchResult]:
        """Search notes; results keep the order the API returns them in."""
        try:
            raw = await self._request_json(
                "GET", "/search-notes", params={"q": query, "limit": limit}
            )
            if not isinstance(raw, dict):
                raise ValueError(f"Unexpected JSON type: {type(raw).__name__}")
            return [SearchResult.model_validate(item) for item in raw.get("results") or []]
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error('Error searching for "{}": {}', query, cause)
            raise NoteSearchError(query, cause, status) from exc

    async def get_ask_info(self) -> Any:
        try:
            return await self._request_json("GET", "/ask")
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error fetching Ask info: {}", cause)
            raise AskInfoError(cause, status) from exc

    async def get_ask_index(self) -> Any:
        try:
            return await self._request_json("GET", "/ask/index")
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error fetching Ask index: {}", cause)
            raise AskIndexError(cause, status) from exc

    async def get_automation_assistant(self, assistant_id: str) -> Any:
        try:
            return await self._request_json("GET", f"/super/automation/{assistant_id}")
        except _FAILURES as exc:
            cause, status = _cause(exc)
            logger.error("Error fetching automation assistant {}: {}", assistant_id, cause)
            raise AutomationAssistantError(assistant_id, cause, status) from exc
