"""FastAPI adapter – table-state dependencies and exception mapper."""
from livetable.adapters.fastapi.deps import TableParamsDep, table_params, table_query_dep
from livetable.adapters.fastapi.exception_mapper import FastAPIExceptionMapper

__all__ = [
    "FastAPIExceptionMapper",
    "TableParamsDep",
    "table_params",
    "table_query_dep",
]
