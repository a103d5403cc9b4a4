"""Table data sources – TableDataSource protocol and InMemoryTableSource."""
from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from livetable.application.table.pagination import Page
from livetable.application.table.query import TableQuery

T = TypeVar("T")

__all__ = ["InMemoryTableSource", "TableDataSource"]


@runtime_checkable
class TableDataSource(Protocol[T]):
    """Port: produce rows for a :class:`TableQuery`.

    ``fetch`` returns one page; ``fetch_all`` returns every matching row in
    the same order, for exports.
    """

    async def fetch(self, query: TableQuery) -> Page[T]: ...
    async def fetch_all(self, query: TableQuery) -> list[T]: ...


def _sort_key(value: Any) -> tuple[str, Any]:
    if isinstance(value, (int, float)):
        return ("", value)
    return (type(value).__name__, value)


class InMemoryTableSource(Generic[T]):
    """Table source over a list of dict-like rows.

    The search term is matched as literal, case-insensitive text against
    *search_fields*.  Rows whose sort value is ``None`` go last in either
    direction.  A column mixing value types is ordered by type first
    (numbers, then the rest by type name), then by value.
    """

    def __init__(
        self,
        items: Sequence[T],
        search_fields: Sequence[str] = (),
        key_fn: Callable[[T], dict[str, Any]] | None = None,
    ) -> None:
        self._items = list(items)
        self._search_fields = tuple(search_fields)
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or (
            lambda x: x if isinstance(x, dict) else x.__dict__
        )

    def _matches(self, row: dict[str, Any], needle: str) -> bool:
        fields = self._search_fields or tuple(row)
        return any(
            row.get(name) is not None and needle in str(row.get(name)).lower()
            for name in fields
        )

    def _select(self, query: TableQuery) -> list[T]:
        rows = self._items
        if query.search:
            needle = query.search.lower()
            rows = [item for item in rows if self._matches(self._key_fn(item), needle)]

        field = query.sort.field
        present = [item for item in rows if self._key_fn(item).get(field) is not None]
        missing = [item for item in rows if self._key_fn(item).get(field) is None]
        present.sort(
            key=lambda item: _sort_key(self._key_fn(item)[field]),
            reverse=query.sort.descending,
        )
        return present + missing

    async def fetch(self, query: TableQuery) -> Page[T]:
        rows = self._select(query)
        if query.size is None:
            return Page(items=rows, total=len(rows), page=1, size=max(len(rows), 1))
        return Page.of(rows, query.page, query.size)

    async def fetch_all(self, query: TableQuery) -> list[T]:
        return self._select(query.unpaginated())
