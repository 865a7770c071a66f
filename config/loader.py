from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

CONFIG_DIR = Path(__file__).resolve().parent

_ENV_FILES = {
    "dev": "config-dev.yaml",
    "prod": "config-prod.yaml",
    "test": "config-test.yaml",
}


class ConfigurationError(Exception):
    """Raised when the config file is missing or malformed."""


@dataclass(frozen=True)
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8889
    debug: bool = False
    secret_key: str = "please-set-HRMS_SECRET_KEY"


@dataclass(frozen=True)
class DBSettings:
    user: str = "root"
    password: str = ""
    host: str = "localhost"
    port: int = 3306
    db_name: str = ""
    name_prefix: str = "hrms_"
    pool_size: int = 5
    auto_init: bool = False
    auto_seed: bool = False

    @property
    def db_names(self) -> list[str]:
        """Branch database names in registration order; the first is the default."""
        return [name.strip() for name in self.db_name.split(",") if name.strip()]


@dataclass(frozen=True)
class LogSettings:
    level: str = "INFO"


@dataclass(frozen=True)
class Settings:
    env: str
    server: ServerSettings = field(default_factory=ServerSettings)
    db: DBSettings = field(default_factory=DBSettings)
    log: LogSettings = field(default_factory=LogSettings)

    def redacted(self) -> dict:
        return {
            "env": self.env,
            "server": {"host": self.server.host, "port": self.server.port, "debug": self.server.debug},
            "db": {
                "user": self.db.user,
                "password": "***",
                "host": self.db.host,
                "port": self.db.port,
                "db_names": self.db.db_names,
            },
            "log": {"level": self.log.level},
        }


def current_env() -> str:
    env = (os.getenv("HRMS_ENV") or "dev").strip().lower()
    if env not in _ENV_FILES:
        raise ConfigurationError(f"Unknown HRMS_ENV={env!r}, expected one of {sorted(_ENV_FILES)}")
    return env


def get_config_path(env: Optional[str] = None) -> Path:
    # Empty or unset falls back to the development file.
    env = env if env is not None else current_env()
    env = (env or "dev").strip().lower()
    try:
        return CONFIG_DIR / _ENV_FILES[env]
    except KeyError:
        raise ConfigurationError(f"Unknown HRMS_ENV={env!r}, expected one of {sorted(_ENV_FILES)}") from None


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _section(data: dict, key: str) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section {key!r} must be a mapping")
    return section


def load_settings(path: Optional[Path] = None, *, env: Optional[str] = None) -> Settings:
    """Read the YAML config selected by HRMS_ENV and apply HRMS_* overrides."""

    env = env or current_env()
    path = Path(path) if path is not None else get_config_path(env)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root in {path} must be a mapping")

    server = _section(data, "server")
    db = _section(data, "db")
    log = _section(data, "log")

    server_settings = ServerSettings(
        host=str(server.get("host", "0.0.0.0")),
        port=_as_int(os.getenv("HRMS_PORT", server.get("port", 8889)), "server.port"),
        debug=_as_bool(server.get("debug", False)),
        secret_key=os.getenv("HRMS_SECRET_KEY") or str(server.get("secret_key") or ServerSettings.secret_key),
    )
    db_settings = DBSettings(
        user=os.getenv("HRMS_DB_USER") or str(db.get("user", "root")),
        password=os.getenv("HRMS_DB_PASSWORD") or str(db.get("password") or ""),
        host=os.getenv("HRMS_DB_HOST") or str(db.get("host", "localhost")),
        port=_as_int(os.getenv("HRMS_DB_PORT", db.get("port", 3306)), "db.port"),
        db_name=os.getenv("HRMS_DB_NAME") or str(db.get("db_name") or ""),
        name_prefix=str(db.get("name_prefix", "hrms_")),
        pool_size=_as_int(db.get("pool_size", 5), "db.pool_size"),
        auto_init=_as_bool(db.get("auto_init", False)),
        auto_seed=_as_bool(db.get("auto_seed", False)),
    )
    if not db_settings.db_names:
        raise ConfigurationError("db.db_name must list at least one branch database")

    return Settings(
        env=env,
        server=server_settings,
        db=db_settings,
        log=LogSettings(level=str(log.get("level", "INFO")).upper()),
    )
