"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

``JsonDbSettings`` reads ``JSONDB_SPACE``, ``JSONDB_DB``, ``JSONDB_BASE_URL``,
``JSONDB_TIMEOUT``, ``JSONDB_CREATED_AT_FIELD`` and ``JSONDB_LOG_LEVEL``.
Unset variables keep the dataclass default.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from dotenv import load_dotenv

from jsondb_client.config.settings.base import Settings
from jsondb_client.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """``JsonDbSettings.base_url`` → ``JSONDB_BASE_URL``."""
    prefix = getattr(settings_class, "_prefix", "")
    return (f"{prefix}_{field_name}" if prefix else field_name).upper()


class SettingsLoader(abc.ABC):
    """Port: build a settings object from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read one environment variable per settings field.

    Fields annotated ``float`` are parsed as numbers; every other field
    receives the raw string.
    """

    def load(self, settings_class: type[T]) -> T:
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            if hints.get(field.name) is float:
                try:
                    values[field.name] = float(raw)
                except ValueError as exc:
                    raise InvalidSettingValueError(key, raw, "expected a number") from exc
            else:
                values[field.name] = raw

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load ``env_file`` into the process environment, then read it like
    :class:`EnvSettingsLoader`.  Variables already set win unless
    ``override`` is true."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
