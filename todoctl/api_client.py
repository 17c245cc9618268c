"""Client for the remote todo service."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

import requests

from todoctl.models import Todo, TodoApiError
from todoctl.settings import Settings

_HEADERS = {"Content-Type": "application/json"}


class TodoApiClient(ABC):
    """Operations the todo service offers."""

    @abstractmethod
    def list(self) -> list[Todo]:
        """Return every todo."""

    @abstractmethod
    def create(self, todo: Todo) -> Todo:
        """Create a todo from the text of the one given and return it."""

    @abstractmethod
    def update(self, todo: Todo) -> Todo:
        """Replace the text of a todo and return the result."""

    @abstractmethod
    def delete(self, todo: Todo) -> None:
        """Delete the todo with the given id."""


class HttpTodoApiClient(TodoApiClient):
    """Talks to the todo service over HTTP with JSON bodies."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, path: str, payload: dict[str, Any]) -> requests.Response:
        url = f"{self.settings.todo_endpoint()}{path}"
        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        try:
            return self.session.request(method, url, headers=_HEADERS, data=body)
        except requests.RequestException as exc:
            raise TodoApiError(repr(exc)) from exc

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return json.loads(response.text)
        except (ValueError, requests.RequestException) as exc:
            raise TodoApiError(repr(exc)) from exc

    @classmethod
    def _decode_todo(cls, response: requests.Response) -> Todo:
        try:
            return Todo.from_dict(cls._decode(response))
        except ValueError as exc:
            raise TodoApiError(str(exc)) from exc

    def list(self) -> list[Todo]:
        response = self._send("GET", "/todos", {"text": ""})
        payload = self._decode(response)
        if not isinstance(payload, dict) or not isinstance(payload.get("todos"), list):
            raise TodoApiError("response has no `todos` list")
        try:
            return [Todo.from_dict(item) for item in payload["todos"]]
        except ValueError as exc:
            raise TodoApiError(str(exc)) from exc

    def create(self, todo: Todo) -> Todo:
        response = self._send("POST", "/todo", {"text": todo.text})
        return self._decode_todo(response)

    def update(self, todo: Todo) -> Todo:
        response = self._send("PUT", "/todo", {"id": todo.id, "text": todo.text})
        return self._decode_todo(response)

    def delete(self, todo: Todo) -> None:
        self._send("DELETE", "/todo", {"id": todo.id})