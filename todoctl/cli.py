"""Command-line interface for managing todos on a remote todo service."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Sequence

from todoctl.api_client import HttpTodoApiClient
from todoctl.models import AppError
from todoctl.repository import ApiTodoRepository
from todoctl.settings import Settings
from todoctl.usecases import UseCases

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TODOCTL_LOG"
DEFAULT_LOG_LEVEL = "debug"

_ID_MAX = 2**32 - 1

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_RESERVED_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each log record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = {"message": record.getMessage()}
        fields.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRIBUTES and not key.startswith("_")
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)
        document = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "fields": fields,
            "target": record.name,
        }
        return json.dumps(document, ensure_ascii=False, default=str)


class _StdoutHandler(logging.Handler):
    """Write formatted records to whatever ``sys.stdout`` is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def _u32(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if not 0 <= number <= _ID_MAX:
        raise argparse.ArgumentTypeError(f"{number} is not in 0..={_ID_MAX}")
    return number


def _package_version() -> str:
    try:
        return version("todoctl")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command line."""
    parser = argparse.ArgumentParser(prog="todoctl", description="Manage todos.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="show todos")
    list_parser.add_argument("-n", "--number", type=_u32, required=True)

    add_parser = commands.add_parser("add", help="add a todo")
    add_parser.add_argument("-t", "--text", required=True)

    update_parser = commands.add_parser("update", help="change a todo's text")
    update_parser.add_argument("--id", type=_u32, required=True)
    update_parser.add_argument("-t", "--text", required=True)

    delete_parser = commands.add_parser("delete", help="delete a todo")
    delete_parser.add_argument("--id", type=_u32, required=True)

    return parser


def build_usecases(settings: Settings) -> UseCases:
    """Wire the HTTP client, repository and use cases together."""
    client = HttpTodoApiClient(settings)
    repository = ApiTodoRepository(client)
    return UseCases.from_repository(repository)


def _log_todo(todo: Any) -> None:
    logger.info("todo", extra={"id": todo.id, "text": todo.text})


def run(args: argparse.Namespace, usecases: UseCases) -> None:
    """Carry out the parsed command, logging each todo it yields."""
    if args.command == "list":
        for todo in usecases.get_todo_list.run()[: args.number]:
            _log_todo(todo)
    elif args.command == "add":
        _log_todo(usecases.add_todo.run(args.text))
    elif args.command == "update":
        _log_todo(usecases.update_todo.run(args.id, args.text))
    elif args.command == "delete":
        usecases.delete_todo.run(args.id)
    else:
        raise ValueError(f"unknown command: {args.command!r}")


def configure_logging() -> None:
    """Send JSON log lines to standard output at the level the environment asks for."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().lower()
    level = _LEVELS.get(name, _LEVELS[DEFAULT_LOG_LEVEL])
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _StdoutHandler)]:
        root.removeHandler(handler)
    handler = _StdoutHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse arguments, run the command, return the exit status."""
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        usecases = build_usecases(Settings.load())
        run(args, usecases)
    except AppError as exc:
        logger.error("%r", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())