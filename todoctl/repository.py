"""Storage of todos, backed by the todo service client."""

from __future__ import annotations

from abc import ABC, abstractmethod

from todoctl.api_client import TodoApiClient
from todoctl.models import Todo


class TodoRepository(ABC):
    """Where the application keeps its todos."""

    @abstractmethod
    def create(self, text: str) -> Todo:
        """Store a new todo with the given text and return it."""

    @abstractmethod
    def update(self, todo: Todo) -> Todo:
        """Replace the stored todo with the same id and return the result."""

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Remove the todo with the given id."""

    @abstractmethod
    def list(self) -> list[Todo]:
        """Return every stored todo."""


class ApiTodoRepository(TodoRepository):
    """A repository that forwards every operation to a todo service client."""

    def __init__(self, client: TodoApiClient) -> None:
        self.client = client

    def create(self, text: str) -> Todo:
        return self.client.create(Todo(id=0, text=text))

    def update(self, todo: Todo) -> Todo:
        return self.client.update(todo)

    def delete(self, todo_id: int) -> None:
        self.client.delete(Todo(id=todo_id, text=""))

    def list(self) -> list[Todo]:
        return self.client.list()