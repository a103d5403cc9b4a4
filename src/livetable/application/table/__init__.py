"""Application table – view-state engine for sortable, searchable, paginated tables."""
from livetable.application.table.export import ExportFormat, ExportRequest, Exporter, export_rows
from livetable.application.table.pagination import (
    DEFAULT_DISTANCE,
    Page,
    PaginationMetadata,
    page_window,
)
from livetable.application.table.params import (
    ParameterMap,
    extract_search_term,
    flatten_params,
    parse_query_string,
    with_search_term,
)
from livetable.application.table.query import TableQuery
from livetable.application.table.querystring import build_query_string
from livetable.application.table.settings import TableSettings, load_table_settings
from livetable.application.table.sort import (
    DEFAULT_SORT_FIELD,
    SortDirection,
    SortFields,
    SortState,
    next_sort_params,
    resolve_sort,
    reverse_direction,
    sort_link,
)
from livetable.application.table.source import InMemoryTableSource, TableDataSource
from livetable.application.table.view import PageLink, SortLink, TableSummary, TableView

__all__ = [
    "DEFAULT_DISTANCE",
    "DEFAULT_SORT_FIELD",
    "ExportFormat",
    "ExportRequest",
    "Exporter",
    "InMemoryTableSource",
    "Page",
    "PageLink",
    "PaginationMetadata",
    "ParameterMap",
    "SortDirection",
    "SortFields",
    "SortLink",
    "SortState",
    "TableDataSource",
    "TableQuery",
    "TableSettings",
    "TableSummary",
    "TableView",
    "build_query_string",
    "export_rows",
    "extract_search_term",
    "flatten_params",
    "load_table_settings",
    "next_sort_params",
    "page_window",
    "parse_query_string",
    "resolve_sort",
    "reverse_direction",
    "sort_link",
    "with_search_term",
]
