"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   └── ValidationError
    │       ├── UnknownSortFieldError
    │       └── UnsupportedExportFormatError
    └── ApplicationError                 (application.py)
        └── ConfigError                  (livetable.config.validation)
"""

from livetable.kernel.errors.application import ApplicationError
from livetable.kernel.errors.base import BaseError
from livetable.kernel.errors.domain import (
    DomainError,
    UnknownSortFieldError,
    UnsupportedExportFormatError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnknownSortFieldError",
    "UnsupportedExportFormatError",
    "ValidationError",
]
