"""Table query – validated sort, search term and page request for a data source."""
from __future__ import annotations

import dataclasses
from typing import Any

from livetable.application.table.params import PAGE, PAGE_SIZE, ParameterMap, extract_search_term
from livetable.application.table.settings import TableSettings
from livetable.application.table.sort import DEFAULT_SORT_FIELD, SortDirection, SortFields, SortState
from livetable.observability.logging import get_logger

__all__ = ["TableQuery"]

log = get_logger(__name__)


def _positive_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        # ASCII only: str.isdigit() also accepts "²" and "①", which int() rejects.
        value = int(raw.strip())
    else:
        return None
    return value if value >= 1 else None


@dataclasses.dataclass(frozen=True)
class TableQuery:
    """Everything a data source needs to produce one page of a table.

    ``size=None`` asks for the whole result set (exports).
    """

    sort: SortState = SortState(SortDirection.ASC, DEFAULT_SORT_FIELD)
    search: str = ""
    page: int = 1
    size: int | None = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.size is not None and self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        if self.size is None:
            return 0
        return (self.page - 1) * self.size

    @property
    def paginated(self) -> bool:
        return self.size is not None

    def unpaginated(self) -> "TableQuery":
        """Same sort and search, all rows."""
        return dataclasses.replace(self, page=1, size=None)

    @classmethod
    def from_params(
        cls,
        params: ParameterMap,
        fields: SortFields,
        settings: TableSettings | None = None,
    ) -> "TableQuery":
        """Resolve a query from request parameters.

        Raises :class:`~livetable.kernel.errors.UnknownSortFieldError` when
        ``sort_field`` is outside *fields*.  Malformed ``page`` and
        ``page_size`` values fall back to the first page and the default
        size.
        """
        settings = settings or TableSettings(default_sort_field=fields.default)
        sort = fields.resolve(params)
        page = _positive_int(params.get(PAGE)) or 1
        size = _positive_int(params.get(PAGE_SIZE))
        if size is None or size > settings.max_page_size:
            size = settings.default_page_size
        query = cls(sort=sort, search=extract_search_term(params), page=page, size=size)
        log.debug(
            "table_query_resolved",
            sort_field=sort.field,
            sort_direction=sort.direction.value,
            page=page,
            size=size,
            search=query.search,
        )
        return query
