"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from livetable.config.validation import ConfigError
from livetable.kernel.errors import BaseError, DomainError, ValidationError


class FastAPIExceptionMapper:
    """Register livetable error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "unknown_sort_field", "message": "...", "detail": {...}, "errors": [...]}

    Mappings
    --------
    ``ValidationError`` → 400  (unknown sort field, unsupported export format)
    ``DomainError``     → 422
    ``ConfigError``     → 500
    """

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (DomainError, 422),
            (ConfigError, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
