"""FastAPI adapter – dependencies exposing the table state of a request."""
from __future__ import annotations

from typing import Annotated, Any, Callable

from fastapi import Depends, Request

from livetable.application.table.params import parse_query_string
from livetable.application.table.query import TableQuery
from livetable.application.table.settings import TableSettings
from livetable.application.table.sort import SortFields


def table_params(request: Request) -> dict[str, Any]:
    """Parameter map of the request's raw query string.

    ``request.query_params`` flattens ``filter[isearch]`` into a literal key;
    parsing the raw query keeps the nested shape the engine expects.
    """
    return parse_query_string(request.url.query)


TableParamsDep = Annotated[dict[str, Any], Depends(table_params)]


def table_query_dep(
    fields: SortFields,
    settings: TableSettings | None = None,
) -> Callable[[dict[str, Any]], TableQuery]:
    """Build a dependency resolving a :class:`TableQuery` for *fields*.

    An unknown ``sort_field`` raises
    :class:`~livetable.kernel.errors.UnknownSortFieldError`, which
    :class:`~livetable.adapters.fastapi.FastAPIExceptionMapper` turns into
    a 400 response.

    Usage::

        users_query = table_query_dep(SortFields({"id", "name"}))

        @app.get("/users")
        async def users(query: Annotated[TableQuery, Depends(users_query)]): ...
    """

    def dependency(params: TableParamsDep) -> TableQuery:
        return TableQuery.from_params(params, fields, settings)

    return dependency


__all__ = ["TableParamsDep", "table_params", "table_query_dep"]
