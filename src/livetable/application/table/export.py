"""Table export – format selection and the rows handed to a file generator.

Generating CSV/XLSX/PDF bytes is the job of an external exporter; this
module guarantees the exporter receives the rows in the order and with the
filter the user is looking at on screen.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar

from livetable.application.table.params import ParameterMap
from livetable.application.table.query import TableQuery
from livetable.application.table.settings import TableSettings
from livetable.application.table.sort import SortFields
from livetable.application.table.source import TableDataSource
from livetable.kernel.errors import UnsupportedExportFormatError
from livetable.observability.logging import get_logger

__all__ = ["ExportFormat", "ExportRequest", "Exporter", "export_rows"]

T = TypeVar("T")

log = get_logger(__name__)


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"
    PDF = "pdf"

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self]

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def parse(cls, file_type: str) -> "ExportFormat":
        try:
            return cls(file_type.strip().lower())
        except (AttributeError, ValueError) as exc:
            log.warning("export_format_rejected", file_type=file_type)
            raise UnsupportedExportFormatError(
                str(file_type), [member.value for member in cls], cause=exc
            ) from exc


_CONTENT_TYPES: dict[ExportFormat, str] = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.PDF: "application/pdf",
}


@dataclass(frozen=True)
class ExportRequest:
    """Describes an export of the table exactly as currently sorted and filtered."""

    format: ExportFormat
    query: TableQuery
    filename: str = "export"

    @property
    def content_type(self) -> str:
        return self.format.content_type

    @property
    def attachment_filename(self) -> str:
        return f"{self.filename}.{self.format.extension}"

    @classmethod
    def from_params(
        cls,
        params: ParameterMap,
        file_type: str,
        fields: SortFields,
        settings: TableSettings | None = None,
        filename: str = "export",
    ) -> "ExportRequest":
        export_format = ExportFormat.parse(file_type)
        query = TableQuery.from_params(params, fields, settings).unpaginated()
        return cls(format=export_format, query=query, filename=filename)


class Exporter(Protocol):
    """Port: turn the selected rows into a file payload."""

    async def export(self, rows: list[Any], request: ExportRequest) -> bytes: ...


async def export_rows(source: TableDataSource[T], request: ExportRequest) -> list[T]:
    """Fetch every row matching *request*'s sort and search state."""
    start = time.monotonic()
    rows = await source.fetch_all(request.query)
    log.debug(
        "export_rows_collected",
        format=request.format.value,
        rows=len(rows),
        duration_ms=round((time.monotonic() - start) * 1000, 3),
    )
    return rows
