"""Table state – ParameterMap keys, query-string parsing and the search term.

A *parameter map* is the decoded query string of the page hosting a table.
Nested filters use one level of bracket notation on the wire
(``filter[isearch]=jane``) and a nested mapping in memory
(``{"filter": {"isearch": "jane"}}``).
"""
from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import parse_qsl

__all__ = [
    "FILTER",
    "PAGE",
    "PAGE_SIZE",
    "ParameterMap",
    "SEARCH",
    "SORT_DIRECTION",
    "SORT_FIELD",
    "extract_search_term",
    "flatten_params",
    "parse_query_string",
    "with_search_term",
]

ParameterMap = Mapping[str, Any]

SORT_FIELD = "sort_field"
SORT_DIRECTION = "sort_direction"
PAGE = "page"
PAGE_SIZE = "page_size"
FILTER = "filter"
SEARCH = "isearch"

_BRACKET_KEY = re.compile(r"^([^\[\]]+)\[([^\[\]]*)\]$")


def flatten_params(params: ParameterMap) -> dict[str, Any]:
    """Project nested sub-maps onto ``outer[inner]`` keys."""
    flat: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                flat[f"{key}[{sub_key}]"] = sub_value
        else:
            flat[key] = value
    return flat


def parse_query_string(query: str) -> dict[str, Any]:
    """Decode *query* into a parameter map.

    A leading ``?`` is ignored, blank values are kept and the last
    occurrence of a repeated key wins.
    """
    params: dict[str, Any] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        match = _BRACKET_KEY.match(key)
        if match is None:
            params[key] = value
            continue
        outer, inner = match.groups()
        nested = params.get(outer)
        if not isinstance(nested, dict):
            nested = params[outer] = {}
        nested[inner] = value
    return params


def extract_search_term(params: ParameterMap) -> str:
    """Return ``filter.isearch`` or ``""`` when absent."""
    filters = params.get(FILTER)
    if isinstance(filters, Mapping):
        term = filters.get(SEARCH)
    else:
        term = params.get(f"{FILTER}[{SEARCH}]")
    return term if isinstance(term, str) else ""


def with_search_term(params: ParameterMap, term: str) -> dict[str, Any]:
    """Return a copy of *params* whose ``filter.isearch`` is *term*.

    Other filter keys and the current page are kept.
    """
    updated = dict(params)
    updated.pop(f"{FILTER}[{SEARCH}]", None)
    existing = params.get(FILTER)
    filters = dict(existing) if isinstance(existing, Mapping) else {}
    filters[SEARCH] = term
    updated[FILTER] = filters
    return updated
