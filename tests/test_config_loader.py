from __future__ import annotations

import pytest

from config import ConfigurationError, current_env, get_config_path, load_settings

YAML = """
server:
  port: 9000
  debug: true
  secret_key: s3cret
db:
  user: hr
  password: pw
  host: db.local
  port: 3307
  db_name: "hrms_C001, hrms_C002 ,"
log:
  level: debug
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "HRMS_ENV",
        "HRMS_PORT",
        "HRMS_SECRET_KEY",
        "HRMS_DB_USER",
        "HRMS_DB_PASSWORD",
        "HRMS_DB_HOST",
        "HRMS_DB_PORT",
        "HRMS_DB_NAME",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.mark.parametrize(
    "value, expected",
    [(None, "config-dev.yaml"), ("", "config-dev.yaml"), ("dev", "config-dev.yaml"), ("prod", "config-prod.yaml")],
)
def test_env_selects_config_file(monkeypatch, value, expected):
    if value is not None:
        monkeypatch.setenv("HRMS_ENV", value)
    assert get_config_path().name == expected


def test_unknown_env_is_rejected(monkeypatch):
    monkeypatch.setenv("HRMS_ENV", "staging")
    with pytest.raises(ConfigurationError):
        current_env()


def test_load_settings_reads_all_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(YAML, encoding="utf-8")

    settings = load_settings(path, env="dev")

    assert settings.server.port == 9000
    assert settings.server.debug is True
    assert settings.db.host == "db.local"
    assert settings.db.port == 3307
    assert settings.db.db_names == ["hrms_C001", "hrms_C002"]
    assert settings.log.level == "DEBUG"
    assert settings.redacted()["db"]["password"] == "***"


def test_env_overrides_win(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(YAML, encoding="utf-8")
    monkeypatch.setenv("HRMS_PORT", "9100")
    monkeypatch.setenv("HRMS_DB_NAME", "hrms_X")
    monkeypatch.setenv("HRMS_DB_PASSWORD", "from-env")

    settings = load_settings(path, env="dev")

    assert settings.server.port == 9100
    assert settings.db.db_names == ["hrms_X"]
    assert settings.db.password == "from-env"


def test_missing_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope.yaml", env="dev")


@pytest.mark.parametrize(
    "content",
    [
        "server: [1, 2\n",
        "- just\n- a list\n",
        "server: 5\n",
        "server:\n  port: abc\ndb:\n  db_name: hrms_C001\n",
        "db:\n  db_name: ' , '\n",
    ],
)
def test_malformed_config_is_rejected(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(path, env="dev")


def test_shipped_config_files_load():
    for env in ("dev", "prod", "test"):
        settings = load_settings(env=env)
        assert settings.env == env
        assert settings.db.db_names
