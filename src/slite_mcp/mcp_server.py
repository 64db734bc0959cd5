"""MCP server definition (tools + resources) for Slite."""

from __future__ import annotations

import json
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import BaseModel

from . import __version__
from .errors import SliteApiError
from .models import (
    AutomationAssistantArgs,
    CreateNoteArgs,
    NoArgs,
    SearchNotesArgs,
    UpdateNoteArgs,
)
from .settings import Settings
from .slite_client import SliteClient

SERVER_NAME = "slite-mcp-server"

NOTES_URI = "slite://notes"
NOTE_URI_TEMPLATE = "slite://notes/{noteId}"
_NOTE_URI = re.compile(r"^slite://notes(?:/([^/]+))?$")

# Reading the bare listing URI does not call Slite; there is no listing endpoint wired up.
NOTES_PLACEHOLDER = (
    "This would list all notes from Slite. Listing is not implemented; "
    "read slite://notes/{noteId} to fetch a specific note."
)

UPDATE_REQUIRES_FIELD = "You must provide at least one field to update."

ToolHandler = Callable[[SliteClient, Any], Awaitable[str]]


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """One catalog entry: what is advertised and what runs are the same object."""

    name: str
    description: str
    arguments: type[BaseModel]
    handler: ToolHandler

    def to_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments.model_json_schema(by_alias=True),
        )


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


async def _search_notes(client: SliteClient, args: SearchNotesArgs) -> str:
    results = await client.search_notes(args.query, limit=args.limit)
    lines = "\n".join(
        f"- {item.title}: {item.snippet or 'No snippet available'} ({item.type})"
        for item in results
    )
    return f'Search results for "{args.query}":\n\n{lines}'


async def _create_note(client: SliteClient, args: CreateNoteArgs) -> str:
    note = await client.create_note(
        args.title,
        args.markdown,
        parent_note_id=args.parent_note_id,
        template_id=args.template_id,
        attributes=args.attributes,
    )
    return f"Note created successfully!\nTitle: {note.title}\nID: {note.id}"


async def _update_note(client: SliteClient, args: UpdateNoteArgs) -> str:
    updates = args.updates()
    if updates.is_empty():
        return UPDATE_REQUIRES_FIELD
    note = await client.update_note(args.note_id, updates)
    return f"Note updated successfully!\nTitle: {note.title}\nID: {note.id}"


async def _get_ask_info(client: SliteClient, _: NoArgs) -> str:
    return f"Slite Ask Information:\n{_dump(await client.get_ask_info())}"


async def _get_ask_index(client: SliteClient, _: NoArgs) -> str:
    return f"Slite Ask Index Information:\n{_dump(await client.get_ask_index())}"


async def _get_automation_assistant(client: SliteClient, args: AutomationAssistantArgs) -> str:
    assistant = await client.get_automation_assistant(args.assistant_id)
    return f"Automation Assistant Information:\n{_dump(assistant)}"


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec("search-notes", "Search for notes in Slite", SearchNotesArgs, _search_notes),
        ToolSpec("create-note", "Create a new note in Slite", CreateNoteArgs, _create_note),
        ToolSpec(
            "update-note", "Update an existing note in Slite", UpdateNoteArgs, _update_note
        ),
        ToolSpec("get-ask-info", "Get Slite Ask information", NoArgs, _get_ask_info),
        ToolSpec("get-ask-index", "Get Slite Ask index information", NoArgs, _get_ask_index),
        ToolSpec(
            "get-automation-assistant",
            "Get automation assistant information",
            AutomationAssistantArgs,
            _get_automation_assistant,
        ),
    )
}


def _text_result(text: str, *, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


# --- Core functions (testable without a transport) ---


def list_tools() -> list[types.Tool]:
    return [spec.to_tool() for spec in TOOLS.values()]


def list_resources() -> list[types.Resource]:
    return [
        types.Resource(
            uri=NOTES_URI,
            name="All notes",
            description="List of all Slite notes",
        )
    ]


def list_resource_templates() -> list[types.ResourceTemplate]:
    return [
        types.ResourceTemplate(
            uriTemplate=NOTE_URI_TEMPLATE,
            name="Note by ID",
            description="Get a specific Slite note by ID",
        )
    ]


async def call_tool(
    client: SliteClient, name: str, arguments: dict[str, Any] | None
) -> types.CallToolResult:
    """Run one tool call.

    Unknown tool names raise ``McpError`` (method not found) before anything
    else happens. Every other failure, including invalid arguments, comes back
    as an ``isError`` result whose text starts with ``Error:``.
    """
    spec = TOOLS.get(name)
    if spec is None:
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    try:
        args = spec.arguments.model_validate(arguments or {})
        text = await spec.handler(client, args)
    except Exception as exc:
        logger.warning("Error executing tool {}: {}", name, exc)
        return _text_result(f"Error: {exc}", is_error=True)
    return _text_result(text)


async def read_resource(client: SliteClient, uri: str) -> types.ReadResourceResult:
    """Read ``slite://notes`` or ``slite://notes/{noteId}``."""
    match = _NOTE_URI.match(uri)
    if not match:
        raise McpError(
            types.ErrorData(code=types.INVALID_REQUEST, message=f"Invalid URI format: {uri}")
        )

    note_id = match.group(1)
    if note_id is None:
        return types.ReadResourceResult(
            contents=[
                types.TextResourceContents(
                    uri=uri, mimeType="text/plain", text=NOTES_PLACEHOLDER, title="All Notes"
                )
            ]
        )

    try:
        note = await client.get_note(note_id)
    except SliteApiError as exc:
        raise McpError(
            types.ErrorData(
                code=types.INTERNAL_ERROR,
                message=f"Failed to fetch note information: {exc}",
            )
        ) from exc

    return types.ReadResourceResult(
        contents=[
            types.TextResourceContents(
                uri=uri,
                mimeType="text/markdown",
                text=note.markdown or note.to_json(),
                title=note.title,
            )
        ]
    )


def create_mcp_server(client: SliteClient) -> Server:
    server: Server = Server(
        SERVER_NAME,
        version=__version__,
        instructions=(
            "Search, read, create and update Slite notes. "
            "Use tools for note operations and slite://notes/{noteId} to load note content."
        ),
    )

    @server.list_resources()
    async def _list_resources() -> list[types.Resource]:
        return list_resources()

    @server.list_resource_templates()
    async def _list_resource_templates() -> list[types.ResourceTemplate]:
        return list_resource_templates()

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return list_tools()

    # Registered directly: the decorator forms turn McpError into tool output,
    # while unknown tools and bad URIs must reach the host as JSON-RPC errors.
    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(client, req.params.name, req.params.arguments)
        return types.ServerResult(result)

    async def _read_resource(req: types.ReadResourceRequest) -> types.ServerResult:
        return types.ServerResult(await read_resource(client, str(req.params.uri)))

    server.request_handlers[types.CallToolRequest] = _call_tool
    server.request_handlers[types.ReadResourceRequest] = _read_resource
    return server


async def serve(settings: Settings) -> None:
    """Serve MCP over stdio until the host closes the stream."""
    async with SliteClient.from_settings(settings) as client:
        server = create_mcp_server(client)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Slite MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
