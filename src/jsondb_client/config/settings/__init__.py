"""Config settings – 12-factor env-based configuration."""
from jsondb_client.config.settings.base import JsonDbSettings, Settings
from jsondb_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader, env_key

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "JsonDbSettings", "Settings", "SettingsLoader", "env_key"]
