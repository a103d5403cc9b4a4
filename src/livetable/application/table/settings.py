"""Table settings – window distance, default sort field and page sizes."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from livetable.application.table.sort import DEFAULT_SORT_FIELD
from livetable.config.settings import EnvSettingsLoader, Settings, SettingsFactory
from livetable.config.validation import InvalidSettingValueError

__all__ = ["TableSettings", "load_table_settings"]


@dataclasses.dataclass
class TableSettings(Settings):
    """Per-table configuration.

    Read from ``LIVETABLE_*`` environment variables by
    :func:`load_table_settings`, or constructed directly.
    """

    _prefix: ClassVar[str] = "LIVETABLE"

    distance: int = 5
    default_sort_field: str = DEFAULT_SORT_FIELD
    default_page_size: int = 10
    max_page_size: int = 1000

    def _validate(self) -> None:
        if self.distance < 1:
            raise InvalidSettingValueError("distance", self.distance, "must be >= 1")
        if not self.default_sort_field:
            raise InvalidSettingValueError(
                "default_sort_field", self.default_sort_field, "must not be empty"
            )
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and {self.max_page_size}",
            )


def load_table_settings(**overrides: object) -> TableSettings:
    """Build :class:`TableSettings` from the environment plus *overrides*."""
    return SettingsFactory.create(TableSettings, [EnvSettingsLoader()], dict(overrides))
