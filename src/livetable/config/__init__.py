"""Config – 12-factor settings, loaders, and validation errors."""

from livetable.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from livetable.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
