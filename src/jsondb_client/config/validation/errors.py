"""Config validation – errors raised while building or loading settings.

Each error names the offending setting in ``detail`` so it can be shown
next to the variable the operator has to fix.
"""
from __future__ import annotations

from jsondb_client.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No value and no default for *setting_name*."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' must be provided",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """*value* was given for *setting_name* but cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' = {value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
