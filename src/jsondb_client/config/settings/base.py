"""Config settings – Settings base class and JsonDbSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from jsondb_client.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class JsonDbSettings(Settings):
    """Target database and transport of the client.

    ``space``/``db`` are read once when a client, executor or staging
    service is built; changing them later does not retarget existing
    instances.
    """

    _prefix: ClassVar[str] = "JSONDB"

    space: str = "un2"
    db: str = "_system"
    base_url: str = "http://127.0.0.1:1420"
    timeout: float = 10.0
    created_at_field: str = "createdAt"
    log_level: str = "INFO"

    def _validate(self) -> None:
        for name in ("space", "db", "created_at_field"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(name, value, "must be a non-empty string")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be > 0")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["JsonDbSettings", "Settings"]
