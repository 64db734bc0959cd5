"""Shared test fixtures."""

from __future__ import annotations

import pytest

from slite_mcp.models import Note, SearchResult

from .fakes import FakeSliteClient


@pytest.fixture
def fake_client() -> FakeSliteClient:
    """Return a fake client with one note and two search hits."""
    client = FakeSliteClient()
    client.notes["abc123"] = Note(
        id="abc123",
        title="Onboarding",
        markdown="Hello",
        parentNoteId="root1",
        createdAt="2024-01-01T00:00:00Z",
        updatedAt="2024-01-02T00:00:00Z",
    )
    client.search_results = [
        SearchResult(id="n1", title="Roadmap", snippet="Q3 goals", type="note"),
        SearchResult(id="n2", title="Standup", type="note"),
    ]
    return client
