"""Unit tests for the SQLAlchemy table statement builder.

Uses an in-memory SQLite database via *aiosqlite* — no running server needed.
"""
from __future__ import annotations

import asyncio
from typing import Any

import pytest
from sqlalchemy import Integer, String, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from livetable.adapters.sqlalchemy import SqlAlchemyTableQuery, escape_like
from livetable.application.table import (
    PaginationMetadata,
    SortDirection,
    SortState,
    TableQuery,
)
from livetable.config.validation import ConfigError
from livetable.kernel.errors import UnknownSortFieldError


class Base(DeclarativeBase):
    pass


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(200))
    password: Mapped[str] = mapped_column(String(200), default="secret")


ROWS = [
    {"id": 1, "name": "Jane Doe", "email": "jane@example.com"},
    {"id": 2, "name": "Bob Stone", "email": "bob@example.com"},
    {"id": 3, "name": "Alice Jane", "email": "alice@example.com"},
    {"id": 4, "name": "Carl 100%", "email": "carl_x@example.com"},
    {"id": 5, "name": "Dora", "email": "dora@example.com"},
]


def _table() -> SqlAlchemyTableQuery:
    return SqlAlchemyTableQuery.for_model(
        UserModel, sortable=["id", "name", "email"], searchable=["name", "email"]
    )


async def _run(build: Any) -> list[Any]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(UserModel.__table__.insert(), ROWS)
        result = await conn.execute(build())
        rows = list(result.all())
    await engine.dispose()
    return rows


def _ids(table: SqlAlchemyTableQuery, query: TableQuery, **kwargs: Any) -> list[int]:
    rows = asyncio.run(_run(lambda: table.select(select(UserModel.id), query, **kwargs)))
    return [row[0] for row in rows]


def _count(table: SqlAlchemyTableQuery, query: TableQuery) -> int:
    rows = asyncio.run(_run(lambda: table.count(select(UserModel), query)))
    return rows[0][0]


class TestEscapeLike:
    def test_wildcards_escaped(self) -> None:
        assert escape_like("100%_a") == "100\\%\\_a"

    def test_backslash_escaped(self) -> None:
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain(self) -> None:
        assert escape_like("jane") == "jane"


class TestSqlAlchemyTableQuery:
    def test_fields_whitelist(self) -> None:
        table = _table()
        assert list(table.fields) == ["email", "id", "name"]
        assert table.fields.default == "id"

    def test_unknown_model_column_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SqlAlchemyTableQuery.for_model(UserModel, sortable=["id", "nickname"])

    def test_default_sort(self) -> None:
        assert _ids(_table(), TableQuery()) == [1, 2, 3, 4, 5]

    def test_sort_descending(self) -> None:
        query = TableQuery(sort=SortState(SortDirection.DESC, "name"))
        assert _ids(_table(), query) == [1, 5, 4, 2, 3]

    def test_sort_ascending_email(self) -> None:
        query = TableQuery(sort=SortState(SortDirection.ASC, "email"))
        assert _ids(_table(), query) == [3, 2, 4, 5, 1]

    def test_unknown_sort_field_rejected(self) -> None:
        query = TableQuery(sort=SortState(SortDirection.ASC, "password"))
        with pytest.raises(UnknownSortFieldError):
            _table().select(select(UserModel), query)

    def test_search_case_insensitive(self) -> None:
        assert _ids(_table(), TableQuery(search="JANE")) == [1, 3]

    def test_search_percent_is_literal(self) -> None:
        assert _ids(_table(), TableQuery(search="100%")) == [4]

    def test_search_underscore_is_literal(self) -> None:
        assert _ids(_table(), TableQuery(search="l_x")) == [4]

    def test_search_is_bound_parameter(self) -> None:
        stmt = _table().select(select(UserModel), TableQuery(search="x' OR 1=1 --"))
        compiled = stmt.compile()
        assert "OR 1=1" not in str(compiled)
        assert "%x' OR 1=1 --%" in compiled.params.values()

    def test_pagination(self) -> None:
        assert _ids(_table(), TableQuery(page=2, size=2)) == [3, 4]
        assert _ids(_table(), TableQuery(page=3, size=2)) == [5]

    def test_paginate_false(self) -> None:
        assert _ids(_table(), TableQuery(page=2, size=2), paginate=False) == [1, 2, 3, 4, 5]

    def test_unpaginated_query(self) -> None:
        assert _ids(_table(), TableQuery(page=2, size=2).unpaginated()) == [1, 2, 3, 4, 5]

    def test_count_ignores_pagination(self) -> None:
        assert _count(_table(), TableQuery(page=2, size=2)) == 5

    def test_count_with_search(self) -> None:
        assert _count(_table(), TableQuery(search="jane")) == 2

    def test_metadata_from_count(self) -> None:
        query = TableQuery(page=2, size=2)
        meta = PaginationMetadata.of(_count(_table(), query), query.page, query.size)
        assert (meta.total_pages, meta.first_entry, meta.last_entry) == (3, 3, 4)

    def test_no_search_columns_ignores_term(self) -> None:
        table = SqlAlchemyTableQuery({"id": UserModel.id})
        assert _ids(table, TableQuery(search="jane")) == [1, 2, 3, 4, 5]
