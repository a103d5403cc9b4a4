"""Table state – canonical query-string builder.

Every state transition of a table (page link, sort header, search
submission) becomes a URL through :func:`build_query_string`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import urlencode

from livetable.application.table.params import (
    PAGE,
    SORT_DIRECTION,
    SORT_FIELD,
    ParameterMap,
    flatten_params,
)

__all__ = ["build_query_string"]

# Keys that fall back to the current value when an override is None.
_PROJECTED_KEYS = (PAGE, SORT_FIELD, SORT_DIRECTION)


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query_string(
    params: ParameterMap,
    overrides: Mapping[str, Any] | None = None,
) -> str:
    """Merge *overrides* over *params* and encode the result.

    ``page``, ``sort_field`` and ``sort_direction`` resolve to the override
    when it is not ``None``, else to the current value, else are omitted.
    Any other override replaces the current value; an override of ``None``
    removes the key.  Keys are emitted in lexicographic order.

    >>> build_query_string({"page": "2"}, {"sort_field": "email", "sort_direction": "asc"})
    'page=2&sort_direction=asc&sort_field=email'
    """
    overrides = overrides or {}
    merged = flatten_params(params)

    for key, value in flatten_params(overrides).items():
        if key in _PROJECTED_KEYS:
            continue
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value

    for key in _PROJECTED_KEYS:
        value = overrides.get(key)
        if value is None:
            value = merged.get(key)
        merged[key] = value

    pairs = sorted(
        (key, _stringify(value)) for key, value in merged.items() if value is not None
    )
    return urlencode(pairs)
