import pytest

from todoctl.models import SettingInitializeError
from todoctl.settings import Settings, TodoServiceSetting

VALID_YAML = """\
todo_service_setting:
  host: localhost:9999
  api_root: /api
  protocol: https
"""


def test_get_todo_endpoint_success():
    settings = Settings(
        TodoServiceSetting(host="localhost:9999", api_root="/api", protocol="https")
    )
    assert settings.todo_endpoint() == "https://localhost:9999/api"


def test_load_from_path(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text(VALID_YAML, encoding="utf-8")
    settings = Settings.load(path)
    assert settings.todo_service_setting == TodoServiceSetting(
        host="localhost:9999", api_root="/api", protocol="https"
    )
    assert settings.todo_endpoint() == "https://localhost:9999/api"


def test_load_default_file_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / "settings.yaml").write_text(VALID_YAML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert Settings.load().todo_endpoint() == "https://localhost:9999/api"


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text(VALID_YAML + "other: 1\n", encoding="utf-8")
    assert Settings.load(path).todo_service_setting.host == "localhost:9999"


def test_missing_file(tmp_path):
    with pytest.raises(SettingInitializeError):
        Settings.load(tmp_path / "absent.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text("todo_service_setting: [unclosed\n", encoding="utf-8")
    with pytest.raises(SettingInitializeError):
        Settings.load(path)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "- a\n- b\n",
        "other: 1\n",
        "todo_service_setting: 3\n",
        "todo_service_setting:\n  host: h\n  api_root: /api\n",
        "todo_service_setting:\n  host: 5\n  api_root: /api\n  protocol: http\n",
    ],
)
def test_incomplete_settings(tmp_path, content):
    path = tmp_path / "conf.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingInitializeError):
        Settings.load(path)