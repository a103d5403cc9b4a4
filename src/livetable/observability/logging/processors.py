"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class TableContextProcessor:
    """structlog processor that tags events with the table they concern.

    A table binds ``table`` on its logger; the processor copies the value
    into ``component`` so JSON output can be grouped per table widget.

    Usage::

        import structlog
        from livetable.observability.logging.processors import TableContextProcessor

        structlog.configure(processors=[TableContextProcessor(), ...])
    """

    def __init__(self, field: str = "component") -> None:
        self._field = field

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        table = event_dict.get("table")
        if table is not None:
            event_dict.setdefault(self._field, f"table:{table}")
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["TableContextProcessor", "get_logger"]
