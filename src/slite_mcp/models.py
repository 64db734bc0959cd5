"""Structured models for Slite payloads and MCP tool arguments."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    title: str | None = None
    markdown: str | None = None
    html: str | None = None
    parent_note_id: str | None = Field(default=None, alias="parentNoteId")
    attributes: list[str] | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=2)


class SearchResult(BaseModel):
    id: str
    title: str | None = None
    snippet: str | None = None
    type: str | None = None


class NoteUpdate(BaseModel):
    """Partial set of mutable note fields; unset or blank fields are never sent."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    markdown: str | None = None
    parent_note_id: str | None = Field(default=None, alias="parentNoteId")
    attributes: list[str] | None = None

    def is_empty(self) -> bool:
        return not self.payload()

    def payload(self) -> dict[str, Any]:
        # Blank strings count as not given; an empty attribute list is still sent.
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: value for key, value in data.items() if value != ""}


# Tool arguments. Field aliases are the names advertised to the host.


class NoArgs(BaseModel):
    pass


class SearchNotesArgs(BaseModel):
    query: str = Field(description="The search query")
    limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of results to return (at least 1)",
    )


class CreateNoteArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="Note title")
    markdown: str = Field(description="Note content in markdown format")
    parent_note_id: str | None = Field(
        default=None, alias="parentNoteId", description="Parent note ID"
    )
    template_id: str | None = Field(
        default=None, alias="templateId", description="Template ID to use"
    )
    attributes: list[str] | None = Field(default=None, description="Note attributes")


class UpdateNoteArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    note_id: str = Field(alias="noteId", description="Note ID to update")
    title: str | None = Field(default=None, description="New note title")
    markdown: str | None = Field(
        default=None, description="New note content in markdown format"
    )
    parent_note_id: str | None = Field(
        default=None, alias="parentNoteId", description="New parent note ID"
    )
    attributes: list[str] | None = Field(default=None, description="New note attributes")

    def updates(self) -> NoteUpdate:
        return NoteUpdate(
            title=self.title,
            markdown=self.markdown,
            parent_note_id=self.parent_note_id,
            attributes=self.attributes,
        )


class AutomationAssistantArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assistant_id: str = Field(alias="assistantId", description="Assistant ID to retrieve")
