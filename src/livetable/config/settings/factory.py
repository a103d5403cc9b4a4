"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from livetable.config.settings.base import Settings
from livetable.config.settings.loaders import SettingsLoader
from livetable.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from livetable.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

log = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that cannot reach its source, or lacks a required field another
    source may supply, is logged and skipped.  A value a loader *did* read
    but could not accept raises, so a bad setting is never replaced by the
    default.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~livetable.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of :class:`~livetable.config.settings.loaders.\
SettingsLoader` instances.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and per-table tweaks.

        Returns
        -------
        T
            Populated settings instance.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a loader or the settings class rejects a value.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except MissingRequiredSettingError as exc:
                log.info(
                    "settings_loader_incomplete",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    setting=exc.setting_name,
                )
                continue
            except ConfigError:
                raise
            except Exception as exc:  # noqa: BLE001 – skip unreachable sources
                log.warning(
                    "settings_loader_failed",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    error=str(exc),
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
