"""SQLAlchemy adapter – table sort/search/page statements."""
from livetable.adapters.sqlalchemy.query import SqlAlchemyTableQuery, escape_like

__all__ = ["SqlAlchemyTableQuery", "escape_like"]
