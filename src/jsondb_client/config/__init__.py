"""Config – 12-factor settings and loaders."""

from jsondb_client.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonDbSettings,
    Settings,
    SettingsLoader,
    env_key,
)
from jsondb_client.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "JsonDbSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "env_key",
]
