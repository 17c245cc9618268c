# todoctl

`todoctl` is a command-line client for a todo service that speaks JSON over HTTP.
It can list, add, update and delete todos. Each result is written to standard output
as a JSON log line.

## Installation

```
pip install .
```

## Configuration

`todoctl` reads `settings.yaml` from the current working directory:

```yaml
todo_service_setting:
  protocol: https
  host: localhost:9999
  api_root: /api
```

All three fields are required and must be strings. These settings give the endpoint
`https://localhost:9999/api`. Requests go to these URLs:

| Command  | Method   | URL                | JSON body              |
|----------|----------|--------------------|------------------------|
| `list`   | `GET`    | `<endpoint>/todos` | `{"text": ""}`         |
| `add`    | `POST`   | `<endpoint>/todo`  | `{"text": ...}`        |
| `update` | `PUT`    | `<endpoint>/todo`  | `{"id": ..., "text": ...}` |
| `delete` | `DELETE` | `<endpoint>/todo`  | `{"id": ...}`          |

The `list` response must be an object with a `todos` list. The `add` and `update`
responses must be a single todo object with an integer `id` and a string `text`.

## Usage

```
todoctl list --number 10        # show at most 10 todos
todoctl add --text "buy milk"   # create a todo
todoctl update --id 3 --text "buy oat milk"
todoctl delete --id 3
todoctl --version
```

The flags also have short forms: `-n` for `--number` and `-t` for `--text`.
`--number` and `--id` take integers from 0 to 4294967295.

Each todo is logged as one JSON object per line, with `timestamp`, `level`, `target`
and a `fields` object that holds `message`, `id` and `text`.

The log level is read from the `TODOCTL_LOG` environment variable. It accepts
`trace`, `debug`, `info`, `warn`, `warning` and `error`; any other value, or none,
means `debug`.

If the settings file is missing or invalid, or a request fails or its response cannot
be decoded, the error is logged and the command exits with status 1.

## What it does not do

`todoctl` is only a client. It does not include the todo service itself and keeps no
todos of its own. It does not check HTTP status codes: a `delete` counts as done once
the request has been sent, and other commands fail only when the response body is not
what they expect.

## Library use

The layers can also be used from Python:

```python
from todoctl.settings import Settings
from todoctl.cli import build_usecases

usecases = build_usecases(Settings.load("settings.yaml"))
for todo in usecases.get_todo_list.run():
    print(todo.id, todo.text)
```

- `todoctl.models`: `Todo` (with `to_dict` and `from_dict`) and the errors.
- `todoctl.settings`: `Settings` and `TodoServiceSetting`; `Settings.todo_endpoint()`
  returns the base URL.
- `todoctl.api_client`: the abstract `TodoApiClient` and `HttpTodoApiClient`, which
  takes `Settings` and an optional `requests.Session`.
- `todoctl.repository`: the abstract `TodoRepository` and `ApiTodoRepository`.
- `todoctl.usecases`: `GetTodoList`, `AddTodo`, `UpdateTodo`, `DeleteTodo`, and
  `UseCases.from_repository` to build all of them.
- `todoctl.cli`: `build_parser`, `build_usecases`, `run`, `configure_logging`, `main`
  and `JsonFormatter`.

Errors derive from `todoctl.models.AppError`. `SettingInitializeError` is raised for
configuration problems and `TodoApiError` for failed requests or responses that cannot
be decoded.

## Development

```
pip install -e ".[test]"
pytest
```