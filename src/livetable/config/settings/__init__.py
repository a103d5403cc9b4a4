"""Config settings – 12-factor env-based configuration."""
from livetable.config.settings.base import Settings
from livetable.config.settings.factory import SettingsFactory
from livetable.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
