import json

import pytest
import requests
import responses

from todoctl.api_client import HttpTodoApiClient, TodoApiClient
from todoctl.models import Todo, TodoApiError
from todoctl.settings import Settings, TodoServiceSetting

BASE = "https://localhost:9999/api"


@pytest.fixture
def client():
    settings = Settings(
        TodoServiceSetting(host="localhost:9999", api_root="/api", protocol="https")
    )
    return HttpTodoApiClient(settings)


def _sent_json(call):
    return json.loads(call.request.body)


def test_is_a_todo_api_client(client):
    assert isinstance(client, TodoApiClient)
    with pytest.raises(TypeError):
        TodoApiClient()


def test_list(client):
    todos = [{"id": 100, "text": "test2"}, {"id": 101, "text": "test3"}]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/todos", json={"todos": todos})
        result = client.list()
        call = rsps.calls[0]
    assert result == [Todo(100, "test2"), Todo(101, "test3")]
    assert _sent_json(call) == {"text": ""}
    assert call.request.headers["Content-Type"] == "application/json"


def test_create_sends_text_only(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{BASE}/todo", json={"id": 100, "text": "test2"})
        result = client.create(Todo(id=0, text="test"))
        call = rsps.calls[0]
    assert result == Todo(100, "test2")
    assert _sent_json(call) == {"text": "test"}


def test_update(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.PUT, f"{BASE}/todo", json={"id": 100, "text": "test2"})
        result = client.update(Todo(id=1000, text="test"))
        call = rsps.calls[0]
    assert result == Todo(100, "test2")
    assert _sent_json(call) == {"id": 1000, "text": "test"}


def test_delete_ignores_response_body(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, f"{BASE}/todo", body="not json")
        result = client.delete(Todo(id=101, text=""))
        call = rsps.calls[0]
    assert result is None
    assert _sent_json(call) == {"id": 101}


def test_connection_error_becomes_api_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/todos", body=requests.ConnectionError("down"))
        with pytest.raises(TodoApiError):
            client.list()


def test_delete_connection_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, f"{BASE}/todo", body=requests.ConnectionError("down"))
        with pytest.raises(TodoApiError):
            client.delete(Todo(id=1, text=""))


def test_malformed_todo_response(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{BASE}/todo", body="<html>")
        with pytest.raises(TodoApiError):
            client.create(Todo(id=0, text="x"))


def test_list_without_todos_key(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/todos", json={"items": []})
        with pytest.raises(TodoApiError):
            client.list()


def test_update_with_invalid_todo(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.PUT, f"{BASE}/todo", json={"id": "x", "text": "y"})
        with pytest.raises(TodoApiError):
            client.update(Todo(id=1, text="y"))


def test_uses_given_session():
    settings = Settings(
        TodoServiceSetting(host="example.com", api_root="", protocol="http")
    )
    session = requests.Session()
    api = HttpTodoApiClient(settings, session)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/todos", json={"todos": []})
        result = api.list()
    assert api.session is session
    assert result == []