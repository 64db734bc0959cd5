"""Fake implementations for testing the MCP adapter."""

from __future__ import annotations

from typing import Any

from slite_mcp.errors import NoteFetchError, SliteApiError
from slite_mcp.models import Note, NoteUpdate, SearchResult


class FakeSliteClient:
    """In-memory stand-in for SliteClient.

    Returns canned data and records every call for assertions. Set ``fail``
    to make every remote call raise that error instead.
    """

    def __init__(self) -> None:
        self.notes: dict[str, Note] = {}
        self.search_results: list[SearchResult] = []
        self.ask_info: Any = {"enabled": True}
        self.ask_index: Any = {"sources": []}
        self.assistants: dict[str, Any] = {}
        self.fail: SliteApiError | None = None
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail is not None:
            raise self.fail

    async def get_note(self, note_id: str, fmt: str = "md") -> Note:
        self._record("get_note", note_id, fmt)
        if note_id not in self.notes:
            raise NoteFetchError(note_id, "HTTP 404: Not Found", 404)
        return self.notes[note_id]

    async def create_note(
        self,
        title: str,
        markdown: str,
        *,
        parent_note_id: str | None = None,
        template_id: str | None = None,
        attributes: list[str] | None = None,
    ) -> Note:
        self._record("create_note", title, markdown, parent_note_id, template_id, attributes)
        return Note(id="new1", title=title, markdown=markdown)

    async def update_note(self, note_id: str, updates: NoteUpdate) -> Note:
        self._record("update_note", note_id, updates.payload())
        title = updates.title or self.notes.get(note_id, Note(id=note_id)).title
        return Note(id=note_id, title=title)

    async def search_notes(self, query: str, limit: int = 10) -> list[SearchResult]:
        self._record("search_notes", query, limit)
        return self.search_results

    async def get_ask_info(self) -> Any:
        self._record("get_ask_info")
        return self.ask_info

    async def get_ask_index(self) -> Any:
        self._record("get_ask_index")
        return self.ask_index

    async def get_automation_assistant(self, assistant_id: str) -> Any:
        self._record("get_automation_assistant", assistant_id)
        return self.assistants.get(assistant_id, {})
