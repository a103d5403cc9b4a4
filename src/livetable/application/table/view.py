"""Table view – render-ready navigation data for one table.

:class:`TableView` combines the request parameters with the pagination
metadata of the current result page and hands templates plain values:
the page links to draw, the query string behind each sort header, and
the "showing X to Y of Z" summary.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from livetable.application.table.pagination import PaginationMetadata, page_window
from livetable.application.table.params import (
    PAGE,
    SORT_DIRECTION,
    SORT_FIELD,
    ParameterMap,
    extract_search_term,
    with_search_term,
)
from livetable.application.table.querystring import build_query_string
from livetable.application.table.settings import TableSettings
from livetable.application.table.sort import (
    SortDirection,
    SortFields,
    SortState,
    resolve_sort,
    sort_link,
)

__all__ = ["PageLink", "SortLink", "TableSummary", "TableView"]


@dataclasses.dataclass(frozen=True)
class PageLink:
    number: int
    query_string: str
    current: bool = False


@dataclasses.dataclass(frozen=True)
class SortLink:
    """Header link of one column.

    ``direction`` is the column's current direction when it is the active
    sort column, else ``None``.
    """

    field: str
    query_string: str
    active: bool = False
    direction: SortDirection | None = None


@dataclasses.dataclass(frozen=True)
class TableSummary:
    first_entry: int
    last_entry: int
    total_entries: int


class TableView:
    def __init__(
        self,
        params: ParameterMap,
        pagination: PaginationMetadata,
        *,
        settings: TableSettings | None = None,
        fields: SortFields | None = None,
    ) -> None:
        self._params = params
        self._pagination = pagination
        self._settings = settings or TableSettings()
        self._fields = fields

    @property
    def params(self) -> ParameterMap:
        return self._params

    @property
    def pagination(self) -> PaginationMetadata:
        return self._pagination

    @property
    def sort(self) -> SortState:
        if self._fields is not None:
            default = self._fields.default
        else:
            default = self._settings.default_sort_field
        return resolve_sort(self._params, default)

    @property
    def search_term(self) -> str:
        return extract_search_term(self._params)

    @property
    def window(self) -> list[int]:
        return page_window(
            self._pagination.page_number,
            self._pagination.total_pages,
            self._settings.distance,
        )

    @property
    def summary(self) -> TableSummary:
        return TableSummary(
            first_entry=self._pagination.first_entry,
            last_entry=self._pagination.last_entry,
            total_entries=self._pagination.total_entries,
        )

    def page_link(self, number: int) -> str:
        return build_query_string(self._params, {PAGE: number})

    def page_links(self) -> list[PageLink]:
        """Numbered links of the window; none when there is a single page."""
        if self._pagination.total_pages <= 1:
            return []
        current = self._pagination.page_number
        return [
            PageLink(number=n, query_string=self.page_link(n), current=n == current)
            for n in self.window
        ]

    @property
    def previous_link(self) -> str | None:
        if not self._pagination.has_previous:
            return None
        return self.page_link(self._pagination.page_number - 1)

    @property
    def next_link(self) -> str | None:
        if not self._pagination.has_next:
            return None
        return self.page_link(self._pagination.page_number + 1)

    def sort_link(self, field: str) -> SortLink:
        if self._fields is not None:
            self._fields.check(field)
        active = self._params.get(SORT_FIELD) == field
        direction = SortDirection.parse(self._params.get(SORT_DIRECTION)) if active else None
        return SortLink(
            field=field,
            query_string=sort_link(self._params, field),
            active=active,
            direction=direction,
        )

    def sort_links(self) -> list[SortLink]:
        """Header links for every whitelisted column."""
        if self._fields is None:
            return []
        return [self.sort_link(field) for field in self._fields]

    def search_link(self, term: str) -> str:
        return build_query_string(with_search_term(self._params, term))

    def as_dict(self) -> dict[str, Any]:
        """Plain-data snapshot for template engines and JSON APIs."""
        sort = self.sort
        return {
            "sort": {"field": sort.field, "direction": sort.direction.value},
            "search": self.search_term,
            "pagination": dataclasses.asdict(self._pagination),
            "summary": dataclasses.asdict(self.summary),
            "pages": [dataclasses.asdict(link) for link in self.page_links()],
            "previous": self.previous_link,
            "next": self.next_link,
        }
