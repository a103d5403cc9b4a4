"""Domain errors — rejected table state coming from request parameters."""

from __future__ import annotations

from typing import Any, Iterable

from livetable.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when table state violates a rule of the table's schema."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownSortFieldError(ValidationError):
    """A ``sort_field`` parameter names a column outside the whitelist."""

    default_code = "unknown_sort_field"

    def __init__(self, field: str, allowed: Iterable[str], **kwargs: Any) -> None:
        allowed_sorted = sorted(allowed)
        super().__init__(
            f"Cannot sort by unknown field {field!r}",
            errors=[{"param": "sort_field", "value": field, "allowed": allowed_sorted}],
            detail={"field": field},
            **kwargs,
        )
        self.field = field
        self.allowed: tuple[str, ...] = tuple(allowed_sorted)


class UnsupportedExportFormatError(ValidationError):
    """An export was requested in a format the table does not offer."""

    default_code = "unsupported_export_format"

    def __init__(self, file_type: str, supported: Iterable[str], **kwargs: Any) -> None:
        supported_list = list(supported)
        super().__init__(
            f"Unsupported export format: {file_type!r}",
            errors=[{"param": "file_type", "value": file_type, "allowed": supported_list}],
            **kwargs,
        )
        self.file_type = file_type
        self.supported: tuple[str, ...] = tuple(supported_list)


__all__ = [
    "DomainError",
    "UnknownSortFieldError",
    "UnsupportedExportFormatError",
    "ValidationError",
]
