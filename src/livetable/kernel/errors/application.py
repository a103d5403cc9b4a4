"""Application-layer errors — wiring and configuration of a table."""

from __future__ import annotations

from livetable.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
