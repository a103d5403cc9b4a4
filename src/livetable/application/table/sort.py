"""Table state – sort direction, sort state resolution and header toggling."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable

from livetable.application.table.params import SORT_DIRECTION, SORT_FIELD, ParameterMap
from livetable.application.table.querystring import build_query_string
from livetable.config.validation import InvalidSettingValueError
from livetable.kernel.errors import UnknownSortFieldError
from livetable.observability.logging import get_logger

__all__ = [
    "DEFAULT_SORT_FIELD",
    "SortDirection",
    "SortFields",
    "SortState",
    "next_sort_params",
    "resolve_sort",
    "reverse_direction",
    "sort_link",
]

DEFAULT_SORT_FIELD = "id"

log = get_logger(__name__)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: Any) -> "SortDirection | None":
        """Return the direction spelled exactly by *raw*, else ``None``."""
        if isinstance(raw, str):
            for member in cls:
                if member.value == raw:
                    return member
        return None


@dataclasses.dataclass(frozen=True, slots=True)
class SortState:
    """Resolved ordering of a table: ``(direction, field)``."""

    direction: SortDirection
    field: str

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def as_params(self) -> dict[str, str]:
        return {SORT_FIELD: self.field, SORT_DIRECTION: self.direction.value}


def resolve_sort(params: ParameterMap, default_field: str = DEFAULT_SORT_FIELD) -> SortState:
    """Read the sort state carried by *params*.

    Falls back to ascending order on *default_field* unless both
    ``sort_direction`` is exactly ``"asc"``/``"desc"`` and ``sort_field`` is
    a non-empty string.  The field is **not** checked against any schema;
    use :meth:`SortFields.resolve` before building a query from it.
    """
    direction = SortDirection.parse(params.get(SORT_DIRECTION))
    field = params.get(SORT_FIELD)
    if direction is None or not isinstance(field, str) or not field:
        return SortState(SortDirection.ASC, default_field)
    return SortState(direction, field)


def reverse_direction(raw: Any) -> SortDirection:
    """``"asc"`` becomes descending; anything else becomes ascending."""
    if SortDirection.parse(raw) is SortDirection.ASC:
        return SortDirection.DESC
    return SortDirection.ASC


def _sort_overrides(params: ParameterMap, target_field: str) -> dict[str, str]:
    if params.get(SORT_FIELD) == target_field:
        direction = reverse_direction(params.get(SORT_DIRECTION))
    else:
        # A column sorted for the first time starts descending.
        direction = SortDirection.DESC
    return SortState(direction, target_field).as_params()


def next_sort_params(params: ParameterMap, target_field: str) -> dict[str, Any]:
    """Return the parameter map produced by clicking *target_field*'s header.

    Clicking the active column flips its direction; clicking another
    column selects it in descending order.  Every other key, the current
    page included, is carried over unchanged.
    """
    updated = dict(params)
    updated.update(_sort_overrides(params, target_field))
    return updated


def sort_link(params: ParameterMap, target_field: str) -> str:
    """Query string for *target_field*'s sort header."""
    return build_query_string(params, _sort_overrides(params, target_field))


class SortFields:
    """Whitelist of the columns a table may be ordered by.

    Field names reach the engine straight from the URL, so anything outside
    the whitelist is rejected with :class:`UnknownSortFieldError` rather
    than coerced to the default.

    Example::

        fields = SortFields({"id", "name", "email"})
        state = fields.resolve(request_params)   # raises on ?sort_field=password
    """

    def __init__(self, fields: Iterable[str], default: str = DEFAULT_SORT_FIELD) -> None:
        self._fields = frozenset(fields)
        if default not in self._fields:
            raise InvalidSettingValueError(
                "default_sort_field", default, f"not one of {sorted(self._fields)}"
            )
        self._default = default

    @property
    def default(self) -> str:
        return self._default

    @property
    def fields(self) -> frozenset[str]:
        return self._fields

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __iter__(self):  # noqa: ANN204
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"SortFields({sorted(self._fields)!r}, default={self._default!r})"

    def check(self, field: str) -> str:
        """Return *field* if whitelisted, else raise :class:`UnknownSortFieldError`."""
        if field not in self._fields:
            log.warning("sort_field_rejected", field=field, allowed=sorted(self._fields))
            raise UnknownSortFieldError(field, self._fields)
        return field

    def validate(self, state: SortState) -> SortState:
        self.check(state.field)
        return state

    def resolve(self, params: ParameterMap) -> SortState:
        """Resolve the sort state of *params* and validate its field."""
        return self.validate(resolve_sort(params, self._default))
