"""
livetable – view state for server-rendered data tables.

Sort, search and pagination state lives in the page's query string; the
engine reads it, computes the next state and writes it back.

Import path convention::

    from livetable.application.table import TableView, SortFields, build_query_string
    from livetable.kernel.errors import UnknownSortFieldError
    from livetable.adapters.sqlalchemy import SqlAlchemyTableQuery
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
