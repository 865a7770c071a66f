from .loader import (
    ConfigurationError,
    DBSettings,
    LogSettings,
    ServerSettings,
    Settings,
    current_env,
    get_config_path,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DBSettings",
    "LogSettings",
    "ServerSettings",
    "Settings",
    "current_env",
    "get_config_path",
    "load_settings",
]
