"""SQLAlchemy adapter – apply a TableQuery to a ``Select`` statement.

Only whitelisted columns are ever placed in ``ORDER BY`` and the search
term always travels as a bound parameter.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.sql import Select

from livetable.application.table.query import TableQuery
from livetable.application.table.sort import DEFAULT_SORT_FIELD, SortFields, SortState
from livetable.config.validation import ConfigError

__all__ = ["SqlAlchemyTableQuery", "escape_like"]

_LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so *term* matches literally."""
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class SqlAlchemyTableQuery:
    """Builds the statements behind one table.

    Example::

        table = SqlAlchemyTableQuery.for_model(
            User, sortable=["id", "name", "email"], searchable=["name", "email"]
        )
        query = TableQuery.from_params(params, table.fields)
        rows = (await session.execute(table.select(select(User), query))).scalars().all()
        total = (await session.execute(table.count(select(User), query))).scalar_one()
    """

    def __init__(
        self,
        columns: Mapping[str, Any],
        search_columns: Sequence[Any] = (),
        default_field: str = DEFAULT_SORT_FIELD,
    ) -> None:
        self._columns = dict(columns)
        self._fields = SortFields(self._columns, default_field)
        self._search_columns = tuple(search_columns)

    @classmethod
    def for_model(
        cls,
        model: type,
        sortable: Iterable[str],
        searchable: Iterable[str] = (),
        default_field: str = DEFAULT_SORT_FIELD,
    ) -> "SqlAlchemyTableQuery":
        def column(name: str) -> Any:
            try:
                return getattr(model, name)
            except AttributeError as exc:
                raise ConfigError(f"{model.__name__} has no column {name!r}", cause=exc) from exc

        return cls(
            {name: column(name) for name in sortable},
            [column(name) for name in searchable],
            default_field,
        )

    @property
    def fields(self) -> SortFields:
        return self._fields

    def apply_sort(self, stmt: Select, sort: SortState) -> Select:
        column = self._columns[self._fields.check(sort.field)]
        return stmt.order_by(column.desc() if sort.descending else column.asc())

    def apply_search(self, stmt: Select, term: str) -> Select:
        if not term or not self._search_columns:
            return stmt
        pattern = f"%{escape_like(term)}%"
        return stmt.where(
            or_(*(cast(col, String).ilike(pattern, escape=_LIKE_ESCAPE) for col in self._search_columns))
        )

    def select(self, stmt: Select, query: TableQuery, *, paginate: bool = True) -> Select:
        """Filtered, ordered and (unless *paginate* is false) sliced *stmt*."""
        stmt = self.apply_sort(self.apply_search(stmt, query.search), query.sort)
        if paginate and query.size is not None:
            stmt = stmt.limit(query.size).offset(query.offset)
        return stmt

    def count(self, stmt: Select, query: TableQuery) -> Select:
        """``SELECT count(*)`` over the filtered *stmt*."""
        filtered = self.apply_search(stmt, query.search).order_by(None)
        return select(func.count()).select_from(filtered.subquery())
