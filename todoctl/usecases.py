"""Application use cases for managing todos."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from todoctl.models import Todo
from todoctl.repository import TodoRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetTodoList:
    """Fetch every todo."""

    repository: TodoRepository

    def run(self) -> list[Todo]:
        logger.debug("get todo list")
        return self.repository.list()


@dataclass(frozen=True)
class AddTodo:
    """Create a todo from a text."""

    repository: TodoRepository

    def run(self, text: str) -> Todo:
        logger.debug("add todo", extra={"text": text})
        return self.repository.create(text)


@dataclass(frozen=True)
class UpdateTodo:
    """Change the text of an existing todo."""

    repository: TodoRepository

    def run(self, todo_id: int, text: str) -> Todo:
        logger.debug("update todo", extra={"id": todo_id, "text": text})
        return self.repository.update(Todo(id=todo_id, text=text))


@dataclass(frozen=True)
class DeleteTodo:
    """Remove a todo by id."""

    repository: TodoRepository

    def run(self, todo_id: int) -> None:
        logger.debug("delete todo", extra={"id": todo_id})
        self.repository.delete(todo_id)


@dataclass(frozen=True)
class UseCases:
    """Every use case the application offers, sharing one repository."""

    get_todo_list: GetTodoList
    add_todo: AddTodo
    update_todo: UpdateTodo
    delete_todo: DeleteTodo

    @classmethod
    def from_repository(cls, repository: TodoRepository) -> UseCases:
        """Build all use cases on top of the given repository."""
        return cls(
            get_todo_list=GetTodoList(repository),
            add_todo=AddTodo(repository),
            update_todo=UpdateTodo(repository),
            delete_todo=DeleteTodo(repository),
        )