"""Application settings read from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any, Mapping, Union

import yaml

from todoctl.models import SettingInitializeError

DEFAULT_SETTINGS_FILE = "settings.yaml"

_PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class TodoServiceSetting:
    """Where the todo service lives."""

    host: str
    api_root: str
    protocol: str

    @classmethod
    def _from_mapping(cls, data: Any) -> TodoServiceSetting:
        if not isinstance(data, Mapping):
            raise SettingInitializeError("todo_service_setting must be a mapping")
        values = {}
        for name in ("host", "api_root", "protocol"):
            if name not in data:
                raise SettingInitializeError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, str):
                raise SettingInitializeError(f"field `{name}` must be a string")
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class Settings:
    """All settings the application needs."""

    todo_service_setting: TodoServiceSetting

    @classmethod
    def load(cls, path: _PathType = DEFAULT_SETTINGS_FILE) -> Settings:
        """Read settings from a YAML file; raise SettingInitializeError on failure."""
        try:
            with open(path, encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingInitializeError(repr(exc)) from exc
        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SettingInitializeError(repr(exc)) from exc
        if not isinstance(document, Mapping):
            raise SettingInitializeError("settings document must be a mapping")
        if "todo_service_setting" not in document:
            raise SettingInitializeError("missing field `todo_service_setting`")
        return cls(TodoServiceSetting._from_mapping(document["todo_service_setting"]))

    def todo_endpoint(self) -> str:
        """Return the base URL of the todo service."""
        service = self.todo_service_setting
        return f"{service.protocol}://{service.host}{service.api_root}"