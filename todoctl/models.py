"""Core data types and the errors the application reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_ID_MAX = 2**32 - 1


class AppError(Exception):
    """Base class for every error the application reports."""


class SettingInitializeError(AppError):
    """The settings could not be read or understood."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"create setting error: {detail}")


class TodoApiError(AppError):
    """A request to the todo service failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"failed request: {detail}")


@dataclass
class Todo:
    """A single todo item as exchanged with the todo service."""

    id: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping for this todo."""
        return {"id": self.id, "text": self.text}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Todo:
        """Build a todo from a decoded JSON object, validating its fields."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            todo_id = data["id"]
            text = data["text"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if isinstance(todo_id, bool) or not isinstance(todo_id, int):
            raise ValueError(f"id must be an integer, got {todo_id!r}")
        if not 0 <= todo_id <= _ID_MAX:
            raise ValueError(f"id out of range: {todo_id}")
        if not isinstance(text, str):
            raise ValueError(f"text must be a string, got {text!r}")
        return cls(id=todo_id, text=text)