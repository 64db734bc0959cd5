"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class SliteApiError(RuntimeError):
    """Raised when a Slite API call fails for any reason."""

    action: str
    cause: str
    status_code: int | None = None

    def __str__(self) -> str:
        return f"Failed to {self.action}: {self.cause}"


class NoteFetchError(SliteApiError):
    def __init__(self, note_id: str, cause: str, status_code: int | None = None) -> None:
        super().__init__(f"fetch note {note_id}", cause, status_code)
        self.note_id = note_id


class NoteCreateError(SliteApiError):
    def __init__(self, cause: str, status_code: int | None = None) -> None:
        super().__init__("create note", cause, status_code)


class NoteUpdateError(SliteApiError):
    def __init__(self, note_id: str, cause: str, status_code: int | None = None) -> None:
        super().__init__(f"update note {note_id}", cause, status_code)
        self.note_id = note_id


class NoteSearchError(SliteApiError):
    def __init__(self, query: str, cause: str, status_code: int | None = None) -> None:
        super().__init__(f'search for "{query}"', cause, status_code)
        self.query = query


class AskInfoError(SliteApiError):
    def __init__(self, cause: str, status_code: int | None = None) -> None:
        super().__init__("fetch Ask info", cause, status_code)


class AskIndexError(SliteApiError):
    def __init__(self, cause: str, status_code: int | None = None) -> None:
        super().__init__("fetch Ask index", cause, status_code)


class AutomationAssistantError(SliteApiError):
    def __init__(self, assistant_id: str, cause: str, status_code: int | None = None) -> None:
        super().__init__(f"fetch automation assistant {assistant_id}", cause, status_code)
        self.assistant_id = assistant_id
